# tests/test_mentorship.py
import unittest
from sqlalchemy.exc import IntegrityError
from base import StartHubTestCase
from models import (db, MentorshipRequest, MentorshipRelationship, StartupStatus, ReviewStatus,
                    Initiator, RelationshipStatus)
from services import BadRequest, Forbidden, NotFound, Conflict
from services import mentorship as mentorship_service


class TestMentorshipRequests(StartHubTestCase):

    def setUp(self):
        super().setUp()
        self.owner = self.make_user('Ines Innovator')
        self.mentor = self.make_mentor('Mona Mentor')
        self.startup = self.make_startup(self.owner)

    def offer(self, message='Happy to help'):
        return mentorship_service.create_request(
            self.caller(self.mentor), Initiator.MENTOR, None, self.startup.id, message)

    def test_mentor_offer_then_owner_declines(self):
        req = self.offer()
        self.assertEqual(req.status, ReviewStatus.PENDING)
        self.assertEqual(req.mentor_id, self.mentor.id)

        req, relationship = mentorship_service.decline_request(self.caller(self.owner), req.id, 'Not now')
        self.assertEqual(req.status, ReviewStatus.REJECTED)
        self.assertIsNotNone(req.decided_at)
        self.assertIsNone(relationship)
        self.assertEqual(MentorshipRelationship.query.count(), 0)

    def test_mentor_offer_then_owner_accepts(self):
        req = self.offer()
        req, relationship = mentorship_service.accept_request(self.caller(self.owner), req.id)

        self.assertEqual(req.status, ReviewStatus.APPROVED)
        self.assertEqual(relationship.status, RelationshipStatus.ACTIVE)
        self.assertEqual(relationship.request_id, req.id)
        active = MentorshipRelationship.query.filter_by(
            mentor_id=self.mentor.id, startup_id=self.startup.id, status=RelationshipStatus.ACTIVE).all()
        self.assertEqual(len(active), 1)

    def test_initiator_cannot_accept_own_request(self):
        req = self.offer()
        with self.assertRaises(Forbidden):
            mentorship_service.accept_request(self.caller(self.mentor), req.id)
        self.assertEqual(self.reload(req).status, ReviewStatus.PENDING)

    def test_startup_initiated_request_is_decided_by_mentor(self):
        req = mentorship_service.create_request(
            self.caller(self.owner), Initiator.STARTUP, self.mentor.id, self.startup.id)
        with self.assertRaises(Forbidden):
            mentorship_service.accept_request(self.caller(self.owner), req.id)

        req, relationship = mentorship_service.accept_request(self.caller(self.mentor), req.id)
        self.assertEqual(req.status, ReviewStatus.APPROVED)
        self.assertIsNotNone(relationship)

    def test_third_party_cannot_decide(self):
        req = self.offer()
        outsider = self.make_user('Otto Outsider')
        with self.assertRaises(Forbidden):
            mentorship_service.decline_request(self.caller(outsider), req.id)

    def test_decided_request_cannot_be_decided_again(self):
        req = self.offer()
        mentorship_service.accept_request(self.caller(self.owner), req.id)
        with self.assertRaises(Conflict):
            mentorship_service.decline_request(self.caller(self.owner), req.id)
        with self.assertRaises(Conflict):
            mentorship_service.accept_request(self.caller(self.owner), req.id)
        self.assertEqual(MentorshipRelationship.query.count(), 1)

    def test_invalid_decision(self):
        req = self.offer()
        with self.assertRaises(BadRequest):
            mentorship_service.decide_request(self.caller(self.owner), req.id, 'MAYBE')

    def test_duplicate_request_for_pair_conflicts(self):
        self.offer()
        with self.assertRaises(Conflict):
            self.offer('Second try')
        with self.assertRaises(Conflict):
            mentorship_service.create_request(
                self.caller(self.owner), Initiator.STARTUP, self.mentor.id, self.startup.id)
        self.assertEqual(MentorshipRequest.query.count(), 1)

    def test_unapproved_startup_rejects_requests(self):
        pending = self.make_startup(self.owner, 'Draft', status=StartupStatus.PENDING)
        with self.assertRaises(Conflict):
            mentorship_service.create_request(
                self.caller(self.mentor), Initiator.MENTOR, None, pending.id)

    def test_non_mentor_cannot_offer(self):
        with self.assertRaises(Forbidden):
            mentorship_service.create_request(
                self.caller(self.owner), Initiator.MENTOR, None, self.startup.id)

    def test_owner_must_own_startup(self):
        stranger = self.make_user('Sam Stranger')
        with self.assertRaises(Forbidden):
            mentorship_service.create_request(
                self.caller(stranger), Initiator.STARTUP, self.mentor.id, self.startup.id)

    def test_disabled_mentor_cannot_be_requested(self):
        disabled = self.make_mentor('Dora Disabled', disabled=True)
        with self.assertRaises(NotFound):
            mentorship_service.create_request(
                self.caller(self.owner), Initiator.STARTUP, disabled.id, self.startup.id)

    def test_missing_request(self):
        with self.assertRaises(NotFound):
            mentorship_service.accept_request(self.caller(self.owner), 404)

    def test_second_active_relationship_violates_index(self):
        req = self.offer()
        mentorship_service.accept_request(self.caller(self.owner), req.id)

        db.session.add(MentorshipRelationship(mentor_id=self.mentor.id, startup_id=self.startup.id,
                                              status=RelationshipStatus.ACTIVE))
        with self.assertRaises(IntegrityError):
            db.session.commit()
        db.session.rollback()

    def test_ended_relationship_frees_the_index(self):
        req = self.offer()
        _, relationship = mentorship_service.accept_request(self.caller(self.owner), req.id)
        mentorship_service.end_relationship(self.caller(self.mentor), relationship.id)
        self.assertEqual(relationship.status, RelationshipStatus.ENDED)
        self.assertIsNotNone(relationship.ended_at)

        db.session.add(MentorshipRelationship(mentor_id=self.mentor.id, startup_id=self.startup.id,
                                              status=RelationshipStatus.ACTIVE))
        db.session.commit()
        with self.assertRaises(Conflict):
            mentorship_service.end_relationship(self.caller(self.owner), relationship.id)


class TestMentorshipRoutes(StartHubTestCase):

    def test_offer_accept_flow_over_http(self):
        owner = self.make_user('Ines Innovator')
        mentor = self.make_mentor('Mona Mentor')
        startup = self.make_startup(owner)

        self.login(mentor)
        response = self.client.post('/api/mentor/requests', json={'startupId': startup.id})
        self.assertEqual(response.status_code, 201)
        request_id = response.get_json()['request']['id']

        self.assertEqual(self.client.post(f'/api/mentor/requests/{request_id}/accept').status_code, 403)

        self.login(owner)
        listed = self.client.get('/api/startup/mentor-requests').get_json()['requests']
        self.assertEqual([r['id'] for r in listed], [request_id])

        response = self.client.post(f'/api/mentor/requests/{request_id}/accept', json={'response': 'Welcome'})
        self.assertEqual(response.status_code, 200)
        body = response.get_json()
        self.assertEqual(body['request']['status'], 'APPROVED')
        self.assertEqual(body['relationship']['status'], 'ACTIVE')

        mentorships = self.client.get('/api/user/mentorships').get_json()['relationships']
        self.assertEqual(len(mentorships), 1)

        self.login(mentor)
        relationships = self.client.get('/api/mentor/relationships').get_json()['relationships']
        self.assertEqual(relationships[0]['startupId'], startup.id)

    def test_plain_user_cannot_use_mentor_routes(self):
        self.login(self.make_user())
        self.assertEqual(self.client.get('/api/mentor/requests').status_code, 403)


if __name__ == '__main__':
    unittest.main()
