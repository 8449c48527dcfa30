# tests/test_startups.py
import json
import unittest
from base import StartHubTestCase
from models import StartupNews, StartupStatus, Initiator
from services import BadRequest, Forbidden, NotFound, Conflict
from services import startups as startup_service
from services import mentorship as mentorship_service


class TestStartupLifecycle(StartHubTestCase):

    def setUp(self):
        super().setUp()
        self.owner = self.make_user('Ines Innovator')

    def submit(self, **extra):
        data = {'title': 'Rinkside', 'description': 'Booking for community rinks', **extra}
        return startup_service.submit_startup(self.caller(self.owner), data)

    def test_submission_is_pending(self):
        startup = self.submit(projectType='startup', teamMembers=[{'name': 'Ines', 'role': 'CEO'}])
        self.assertEqual(startup.status, StartupStatus.PENDING)
        self.assertEqual(startup.innovator_id, self.owner.id)
        self.assertEqual(json.loads(startup.team_members), [{'name': 'Ines', 'role': 'CEO'}])

    def test_submission_requires_title_and_description(self):
        with self.assertRaises(BadRequest):
            startup_service.submit_startup(self.caller(self.owner), {'title': 'Only a title'})

    def test_team_members_must_be_a_list(self):
        with self.assertRaises(BadRequest):
            self.submit(teamMembers='{not json')
        with self.assertRaises(BadRequest):
            self.submit(teamMembers={'name': 'Ines'})

    def test_admin_transitions(self):
        startup = self.submit()
        startup_service.reject_startup(startup.id)
        self.assertEqual(startup.status, StartupStatus.REJECTED)
        startup_service.approve_startup(startup.id)
        self.assertEqual(startup.status, StartupStatus.APPROVED)
        startup_service.finish_startup(startup.id)
        self.assertEqual(startup.status, StartupStatus.FINISHED)

        with self.assertRaises(Conflict):
            startup_service.approve_startup(startup.id)
        with self.assertRaises(Conflict):
            startup_service.finish_startup(startup.id)

    def test_only_approved_startups_finish(self):
        startup = self.submit()
        with self.assertRaises(Conflict):
            startup_service.finish_startup(startup.id)

    def test_owner_archives_approved_startup(self):
        startup = self.make_startup(self.owner)
        with self.assertRaises(Forbidden):
            startup_service.archive_startup(self.caller(self.make_user('Sam Stranger')), startup.id)
        startup_service.archive_startup(self.caller(self.owner), startup.id)
        self.assertEqual(startup.status, StartupStatus.ARCHIVED)

        pending = self.submit()
        with self.assertRaises(Conflict):
            startup_service.archive_startup(self.caller(self.owner), pending.id)

    def test_public_listing_shows_approved_only(self):
        approved = self.make_startup(self.owner, 'Approved')
        self.make_startup(self.owner, 'Pending', status=StartupStatus.PENDING)
        self.make_startup(self.owner, 'Archived', status=StartupStatus.ARCHIVED)

        self.assertEqual([s.id for s in startup_service.list_startups()], [approved.id])
        self.assertEqual(len(startup_service.list_startups(status='all')), 3)
        self.assertEqual(len(startup_service.list_startups(innovator_id=self.owner.id)), 3)
        self.assertEqual(len(startup_service.list_startups(status='pending')), 1)

    def test_discover_paginates_approved(self):
        for i in range(5):
            self.make_startup(self.owner, f'Startup {i}')
        self.make_startup(self.owner, 'Hidden', status=StartupStatus.PENDING)

        page, total = startup_service.discover_startups(page=2, limit=2)
        self.assertEqual(total, 5)
        self.assertEqual(len(page), 2)

    def test_delete_refuses_with_mentorship_history(self):
        startup = self.make_startup(self.owner)
        mentor = self.make_mentor()
        mentorship_service.create_request(self.caller(mentor), Initiator.MENTOR, None, startup.id)
        with self.assertRaises(Conflict):
            startup_service.delete_startup(startup.id)

        fresh = self.submit()
        startup_service.delete_startup(fresh.id)
        with self.assertRaises(NotFound):
            startup_service.get_startup(fresh.id)


class TestStartupRoutes(StartHubTestCase):

    def test_submit_and_admin_approve(self):
        owner = self.make_user('Ines Innovator')
        self.login(owner)
        response = self.client.post('/api/submit-startup', json={
            'title': 'Rinkside', 'description': 'Booking for community rinks', 'category': 'Sports'
        })
        self.assertEqual(response.status_code, 201)
        startup_id = response.get_json()['startup']['id']
        self.assertEqual(self.client.get('/api/startups').get_json()['startups'], [])

        self.login(self.make_admin())
        pending = self.client.get('/api/admin/startups?status=PENDING').get_json()['startups']
        self.assertEqual([s['id'] for s in pending], [startup_id])
        response = self.client.post(f'/api/admin/startups/{startup_id}/approve')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['startup']['status'], 'APPROVED')

        public = self.client.get('/api/startups').get_json()['startups']
        self.assertEqual([s['id'] for s in public], [startup_id])

    def test_detail_flags_the_owner(self):
        owner = self.make_user('Ines Innovator')
        startup = self.make_startup(owner)
        url = f'/api/startups/{startup.id}'

        self.assertFalse(self.client.get(url).get_json()['isInnovator'])
        self.login(self.make_user('Sam Stranger'))
        self.assertFalse(self.client.get(url).get_json()['isInnovator'])
        self.login(owner)
        body = self.client.get(url).get_json()
        self.assertTrue(body['isInnovator'])
        self.assertEqual(body['startup']['id'], startup.id)

    def test_unknown_startup_is_404(self):
        response = self.client.get('/api/startups/12345')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()['error'], 'Startup not found')

    def test_mentor_discover_pagination(self):
        owner = self.make_user('Ines Innovator')
        for i in range(3):
            self.make_startup(owner, f'Startup {i}')
        self.login(self.make_mentor())
        body = self.client.get('/api/mentor/startups?limit=2').get_json()
        self.assertEqual(body['pagination'], {'page': 1, 'limit': 2, 'total': 3, 'totalPages': 2})
        self.assertEqual(self.client.get('/api/mentor/startups?page=0').status_code, 400)



class TestStartupNews(StartHubTestCase):

    def setUp(self):
        super().setUp()
        self.owner = self.make_user('Ines Innovator')
        self.startup = self.make_startup(self.owner)

    def test_owner_posts_and_edits_updates(self):
        first = startup_service.create_news(self.caller(self.owner), self.startup.id, 'Pilot', 'First rink signed')
        second = startup_service.create_news(self.caller(self.owner), self.startup.id, 'Funding', 'Closed a grant')
        self.assertEqual([n.id for n in startup_service.list_news(self.startup.id)], [second.id, first.id])

        updated = startup_service.update_news(self.caller(self.owner), self.startup.id, first.id,
                                              content='Two rinks signed')
        self.assertEqual((updated.title, updated.content), ('Pilot', 'Two rinks signed'))

        startup_service.delete_news(self.caller(self.owner), self.startup.id, first.id)
        self.assertEqual([n.id for n in startup_service.list_news(self.startup.id)], [second.id])

    def test_title_and_content_required(self):
        with self.assertRaises(BadRequest):
            startup_service.create_news(self.caller(self.owner), self.startup.id, 'Pilot', '')
        news = startup_service.create_news(self.caller(self.owner), self.startup.id, 'Pilot', 'Signed')
        with self.assertRaises(BadRequest):
            startup_service.update_news(self.caller(self.owner), self.startup.id, news.id, title='')

    def test_only_owner_writes(self):
        news = startup_service.create_news(self.caller(self.owner), self.startup.id, 'Pilot', 'Signed')
        stranger = self.caller(self.make_user('Sam Stranger'))
        with self.assertRaises(Forbidden):
            startup_service.create_news(stranger, self.startup.id, 'Fake', 'News')
        with self.assertRaises(Forbidden):
            startup_service.update_news(stranger, self.startup.id, news.id, title='Hijacked')
        with self.assertRaises(Forbidden):
            startup_service.delete_news(stranger, self.startup.id, news.id)

    def test_news_is_scoped_to_its_startup(self):
        other = self.make_startup(self.owner, 'Second venture')
        news = startup_service.create_news(self.caller(self.owner), self.startup.id, 'Pilot', 'Signed')
        with self.assertRaises(NotFound):
            startup_service.update_news(self.caller(self.owner), other.id, news.id, title='Moved')
        with self.assertRaises(NotFound):
            startup_service.list_news(9999)

    def test_deleting_startup_removes_news(self):
        fresh = self.make_startup(self.owner, 'Short lived', status=StartupStatus.PENDING)
        startup_service.create_news(self.caller(self.owner), fresh.id, 'Hello', 'World')
        startup_service.delete_startup(fresh.id)
        self.assertEqual(StartupNews.query.filter_by(startup_id=fresh.id).count(), 0)

    def test_news_over_http(self):
        base = f'/api/startups/{self.startup.id}/news'
        self.assertEqual(self.client.post(base, json={'title': 'A', 'content': 'B'}).status_code, 401)

        self.login(self.owner)
        response = self.client.post(base, json={'title': 'Pilot', 'content': 'First rink signed'})
        self.assertEqual(response.status_code, 201)
        news_id = response.get_json()['news']['id']
        self.assertEqual(self.client.put(f'{base}/{news_id}', json={'title': 'Pilot v2'}).status_code, 200)

        self.login(self.make_user('Sam Stranger'))
        self.assertEqual(self.client.delete(f'{base}/{news_id}').status_code, 403)
        feed = self.client.get(base).get_json()['news']
        self.assertEqual([n['title'] for n in feed], ['Pilot v2'])

        self.login(self.owner)
        self.assertEqual(self.client.delete(f'{base}/{news_id}').status_code, 200)
        self.assertEqual(self.client.get(base).get_json()['news'], [])

if __name__ == '__main__':
    unittest.main()
