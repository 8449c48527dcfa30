# tests/test_calls.py
import unittest
from datetime import datetime, timedelta
from base import StartHubTestCase
from models import db, ScheduledCall, CallStatus, Initiator
from services import BadRequest, Forbidden, Conflict
from services import calls as call_service
from services import mentorship as mentorship_service
from utils.notifications import mail

NOW = datetime(2026, 3, 2, 9, 0, 0)


class CallTestCase(StartHubTestCase):

    def setUp(self):
        super().setUp()
        self.owner = self.make_user('Ines Innovator')
        self.mentor = self.make_mentor('Mona Mentor')
        self.startup = self.make_startup(self.owner)
        req = mentorship_service.create_request(
            self.caller(self.mentor), Initiator.MENTOR, None, self.startup.id)
        _, self.relationship = mentorship_service.accept_request(self.caller(self.owner), req.id)

    def propose(self, by=None, when=None, duration=45):
        when = when or NOW + timedelta(days=1)
        return call_service.propose_call(self.caller(by or self.mentor), self.relationship.id,
                                         when.isoformat() + 'Z', duration, 'Pitch review')


class TestScheduledCalls(CallTestCase):

    def test_proposal_notifies_other_party(self):
        with mail.record_messages() as outbox:
            call = self.propose()

        self.assertEqual(call.status, CallStatus.PROPOSED)
        self.assertEqual(call.proposed_by_id, self.mentor.id)
        self.assertEqual(call.duration, 45)
        self.assertEqual(call.meeting_url, f'https://meet.example.org/StartHub-Session-{self.relationship.id}')
        self.assertEqual(len(outbox), 1)
        self.assertIn(self.owner.email, outbox[0].recipients[0])
        self.assertIn('New Call Scheduled', outbox[0].subject)

    def test_proposer_cannot_confirm_own_call(self):
        call = self.propose(by=self.mentor)
        with self.assertRaises(Forbidden):
            call_service.confirm_call(self.caller(self.mentor), self.relationship.id, call.id)
        self.assertEqual(self.reload(call).status, CallStatus.PROPOSED)

    def test_other_party_confirms(self):
        call = self.propose(by=self.mentor)
        with mail.record_messages() as outbox:
            call = call_service.confirm_call(self.caller(self.owner), self.relationship.id, call.id)
        self.assertEqual(call.status, CallStatus.CONFIRMED)
        self.assertEqual(len(outbox), 1)
        self.assertIn(self.mentor.email, outbox[0].recipients[0])

    def test_confirming_twice_conflicts(self):
        call = self.propose(by=self.owner)
        call_service.confirm_call(self.caller(self.mentor), self.relationship.id, call.id)
        with self.assertRaises(Conflict):
            call_service.confirm_call(self.caller(self.mentor), self.relationship.id, call.id)

    def test_decline_by_other_party_notifies_proposer(self):
        call = self.propose(by=self.mentor)
        with mail.record_messages() as outbox:
            call = call_service.decline_call(self.caller(self.owner), self.relationship.id, call.id)
        self.assertEqual(call.status, CallStatus.DECLINED)
        self.assertEqual(len(outbox), 1)

        with self.assertRaises(Conflict):
            call_service.decline_call(self.caller(self.owner), self.relationship.id, call.id)

    def test_proposer_may_withdraw_without_email(self):
        call = self.propose(by=self.mentor)
        with mail.record_messages() as outbox:
            call_service.decline_call(self.caller(self.mentor), self.relationship.id, call.id)
        self.assertEqual(outbox, [])

    def test_outsider_has_no_access(self):
        outsider = self.make_user('Otto Outsider')
        with self.assertRaises(Forbidden):
            self.propose(by=outsider)

    def test_ended_relationship_rejects_new_calls(self):
        mentorship_service.end_relationship(self.caller(self.owner), self.relationship.id)
        with self.assertRaises(Conflict):
            self.propose()

    def test_ended_relationship_rejects_confirmation(self):
        call = self.propose(by=self.mentor)
        mentorship_service.end_relationship(self.caller(self.mentor), self.relationship.id)
        with self.assertRaises(Conflict):
            call_service.confirm_call(self.caller(self.owner), self.relationship.id, call.id)
        self.assertEqual(self.reload(call).status, CallStatus.PROPOSED)

    def test_invalid_time_is_bad_request(self):
        with self.assertRaises(BadRequest):
            call_service.propose_call(self.caller(self.mentor), self.relationship.id, 'next tuesday')
        with self.assertRaises(BadRequest):
            call_service.propose_call(self.caller(self.mentor), self.relationship.id, None)

    def test_listing_completes_past_confirmed_calls(self):
        past = self.propose(when=NOW - timedelta(hours=3), duration=30)
        upcoming = self.propose(when=NOW + timedelta(hours=3))
        call_service.confirm_call(self.caller(self.owner), self.relationship.id, past.id)
        call_service.confirm_call(self.caller(self.owner), self.relationship.id, upcoming.id)

        calls = call_service.list_calls(self.caller(self.owner), self.relationship.id, now=NOW)
        self.assertEqual([c.id for c in calls], [past.id, upcoming.id])
        self.assertEqual(calls[0].status, CallStatus.COMPLETED)
        self.assertEqual(calls[1].status, CallStatus.CONFIRMED)

        with self.assertRaises(Conflict):
            call_service.decline_call(self.caller(self.owner), self.relationship.id, past.id)


class TestReminders(CallTestCase):

    def confirmed_call(self, starts_in):
        call = self.propose(when=NOW + starts_in)
        return call_service.confirm_call(self.caller(self.owner), self.relationship.id, call.id)

    def test_reminder_sent_to_both_parties_once(self):
        call = self.confirmed_call(timedelta(minutes=45))

        with mail.record_messages() as outbox:
            processed, sent = call_service.send_due_reminders(now=NOW)
        self.assertEqual((processed, sent), (1, 2))
        self.assertEqual(len(outbox), 2)
        recipients = {m.recipients[0] for m in outbox}
        self.assertTrue(any(self.mentor.email in r for r in recipients))
        self.assertTrue(any(self.owner.email in r for r in recipients))
        self.assertTrue(self.reload(call).reminder_sent)

        with mail.record_messages() as outbox:
            self.assertEqual(call_service.send_due_reminders(now=NOW), (0, 0))
        self.assertEqual(outbox, [])

    def test_no_reminder_after_mentorship_ended(self):
        call = self.confirmed_call(timedelta(minutes=45))
        mentorship_service.end_relationship(self.caller(self.owner), self.relationship.id)

        with mail.record_messages() as outbox:
            self.assertEqual(call_service.send_due_reminders(now=NOW), (0, 0))
        self.assertEqual(outbox, [])
        self.assertFalse(self.reload(call).reminder_sent)

    def test_only_calls_inside_window(self):
        self.confirmed_call(timedelta(minutes=10))
        self.confirmed_call(timedelta(minutes=90))
        self.propose(when=NOW + timedelta(minutes=40))  # never confirmed

        self.assertEqual(call_service.send_due_reminders(now=NOW), (0, 0))

    def test_window_bounds_are_inclusive(self):
        self.confirmed_call(timedelta(minutes=30))
        self.confirmed_call(timedelta(minutes=60))
        processed, _ = call_service.send_due_reminders(now=NOW)
        self.assertEqual(processed, 2)

    def test_cron_endpoint_checks_secret(self):
        self.app.config['CRON_SECRET'] = 's3cret'
        self.assertEqual(self.client.get('/api/cron/send-reminders').status_code, 401)
        self.assertEqual(self.client.get('/api/cron/send-reminders?secret=wrong').status_code, 401)

        response = self.client.get('/api/cron/send-reminders?secret=s3cret')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['callsProcessed'], 0)

    def test_cli_sweep(self):
        result = self.app.test_cli_runner().invoke(args=['send-reminders'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Processed 0 calls', result.output)


class TestSessionRoutes(CallTestCase):

    def test_call_flow_over_http(self):
        base = f'/api/session/{self.relationship.id}/scheduled-calls'
        self.login(self.mentor)
        response = self.client.post(base, json={'scheduledAt': '2030-05-01T15:00:00Z', 'title': 'Check-in'})
        self.assertEqual(response.status_code, 201)
        call_id = response.get_json()['scheduledCall']['id']
        self.assertEqual(response.get_json()['scheduledCall']['duration'], 30)

        self.assertEqual(self.client.post(f'{base}/{call_id}/confirm').status_code, 403)

        self.login(self.owner)
        response = self.client.post(f'{base}/{call_id}/confirm')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['scheduledCall']['status'], 'CONFIRMED')

        listed = self.client.get(base).get_json()['scheduledCalls']
        self.assertEqual([c['id'] for c in listed], [call_id])

    def test_messages_and_notes(self):
        base = f'/api/session/{self.relationship.id}'
        self.login(self.owner)
        self.assertEqual(self.client.post(f'{base}/messages', json={'content': 'Hello!'}).status_code, 201)
        self.assertEqual(self.client.post(f'{base}/messages', json={'content': '  '}).status_code, 400)

        note = self.client.post(f'{base}/notes', json={'title': 'Goals', 'content': 'Ship v1'})
        self.assertEqual(note.status_code, 201)
        note_id = note.get_json()['note']['id']

        self.login(self.mentor)
        messages = self.client.get(f'{base}/messages').get_json()['messages']
        self.assertEqual([m['content'] for m in messages], ['Hello!'])
        # Only the author edits a note
        self.assertEqual(self.client.put(f'{base}/notes', json={'noteId': note_id, 'title': 'Mine', 'content': 'x'}).status_code, 403)

        self.login(self.owner)
        updated = self.client.put(f'{base}/notes', json={'noteId': note_id, 'title': 'Goals', 'content': 'Ship v1 by June'})
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.get_json()['note']['content'], 'Ship v1 by June')

    def test_outsider_is_forbidden(self):
        self.login(self.make_user('Otto Outsider'))
        self.assertEqual(self.client.get(f'/api/session/{self.relationship.id}/messages').status_code, 403)
        self.assertEqual(self.client.get('/api/session/9999/messages').status_code, 404)


if __name__ == '__main__':
    unittest.main()
