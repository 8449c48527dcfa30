from datetime import datetime, timedelta
from flask import current_app
from models import db, User, ScheduledCall, MentorshipRelationship, CallStatus, RelationshipStatus
from utils.helpers import parse_datetime, parse_int
from utils.notifications import (notify_call_scheduled, notify_call_confirmed,
                                 notify_call_declined, send_call_reminder)
from .errors import BadRequest, Forbidden, NotFound, Conflict
from .mentorship import get_participant_relationship

DEFAULT_DURATION = 30  # minutes

# Confirmed calls starting inside [now + start, now + end] get a reminder
REMINDER_WINDOW_START = timedelta(minutes=30)
REMINDER_WINDOW_END = timedelta(minutes=60)


def _other_party(relationship, user_id):
    if user_id == relationship.mentor_id:
        return relationship.startup.innovator
    return relationship.mentor


def _get_call(relationship, call_id):
    call = db.session.get(ScheduledCall, call_id)
    if call is None or call.relationship_id != relationship.id:
        raise NotFound('Scheduled call not found')
    return call


def propose_call(caller, relationship_id, scheduled_at, duration=None, title=None, description=None):
    """Propose a call; the other participant has to confirm it"""
    relationship = get_participant_relationship(caller, relationship_id)
    if relationship.status != RelationshipStatus.ACTIVE:
        raise Conflict('Calls can only be scheduled in an active mentorship')
    if not scheduled_at:
        raise BadRequest('Scheduled time is required')

    call = ScheduledCall(
        relationship_id=relationship.id,
        proposed_by_id=caller.user_id,
        title=title or 'Mentorship Call',
        description=description or None,
        scheduled_at=parse_datetime(scheduled_at, 'scheduledAt'),
        duration=parse_int(duration, 'duration', default=DEFAULT_DURATION, minimum=1),
        meeting_url=f"{current_app.config['MEETING_URL_BASE']}-{relationship.id}",
        status=CallStatus.PROPOSED
    )
    db.session.add(call)
    db.session.commit()
    print(f"[Calls] Call {call.id} proposed by user {caller.user_id} in relationship {relationship.id}")

    proposer = db.session.get(User, caller.user_id)
    notify_call_scheduled(call, relationship, proposer, _other_party(relationship, caller.user_id))
    return call


def confirm_call(caller, relationship_id, call_id):
    relationship = get_participant_relationship(caller, relationship_id)
    call = _get_call(relationship, call_id)

    if call.proposed_by_id == caller.user_id:
        raise Forbidden('You cannot confirm your own proposed call. The other party must confirm.')
    if relationship.status != RelationshipStatus.ACTIVE:
        raise Conflict('This mentorship has ended')
    if call.status != CallStatus.PROPOSED:
        raise Conflict(f"Call is already {call.status.lower()}")

    call.status = CallStatus.CONFIRMED
    db.session.commit()
    print(f"[Calls] Call {call.id} confirmed by user {caller.user_id}")

    notify_call_confirmed(call, relationship, call.proposed_by, db.session.get(User, caller.user_id))
    return call


def decline_call(caller, relationship_id, call_id):
    """Either participant may decline a proposed or confirmed call"""
    relationship = get_participant_relationship(caller, relationship_id)
    call = _get_call(relationship, call_id)

    if call.status in (CallStatus.DECLINED, CallStatus.COMPLETED):
        raise Conflict(f"Call is already {call.status.lower()}")

    call.status = CallStatus.DECLINED
    db.session.commit()
    print(f"[Calls] Call {call.id} declined by user {caller.user_id}")

    if call.proposed_by_id != caller.user_id:
        notify_call_declined(call, relationship, call.proposed_by, db.session.get(User, caller.user_id))
    return call


def list_calls(caller, relationship_id, now=None):
    """Calls of a relationship in time order; past confirmed calls become COMPLETED"""
    relationship = get_participant_relationship(caller, relationship_id)
    now = now or datetime.utcnow()

    calls = (ScheduledCall.query.filter_by(relationship_id=relationship.id)
             .order_by(ScheduledCall.scheduled_at.asc()).all())

    finished = [c for c in calls if c.status == CallStatus.CONFIRMED and c.ends_at < now]
    if finished:
        for call in finished:
            call.status = CallStatus.COMPLETED
        db.session.commit()
        print(f"[Calls] Marked {len(finished)} past calls completed in relationship {relationship.id}")

    return calls


def send_due_reminders(now=None):
    """
    Email both participants of every confirmed call starting 30 to 60 minutes
    from now, then mark it so it is never selected again.

    The mark is committed per call after its emails went out, so a crash in
    between can repeat a reminder but never skips one.

    Returns:
        tuple: (calls processed, emails sent)
    """
    now = now or datetime.utcnow()
    window_start = now + REMINDER_WINDOW_START
    window_end = now + REMINDER_WINDOW_END

    calls = ScheduledCall.query.join(
        MentorshipRelationship, ScheduledCall.relationship_id == MentorshipRelationship.id
    ).filter(
        MentorshipRelationship.status == RelationshipStatus.ACTIVE,
        ScheduledCall.status == CallStatus.CONFIRMED,
        ScheduledCall.reminder_sent.is_(False),
        ScheduledCall.scheduled_at >= window_start,
        ScheduledCall.scheduled_at <= window_end
    ).order_by(ScheduledCall.scheduled_at.asc()).all()

    emails_sent = 0
    for call in calls:
        relationship = call.relationship
        mentor = relationship.mentor
        innovator = relationship.startup.innovator

        if send_call_reminder(call, relationship, mentor, innovator):
            emails_sent += 1
        if send_call_reminder(call, relationship, innovator, mentor):
            emails_sent += 1

        call.reminder_sent = True
        db.session.commit()

    print(f"[Reminders] Processed {len(calls)} calls, sent {emails_sent} reminder emails")
    return len(calls), emails_sent
