"""
Mentorship request and relationship transitions.

A request moves PENDING -> APPROVED or PENDING -> REJECTED, decided only by
the party that did not initiate it. Approval and the creation of the ACTIVE
relationship are committed together; the partial unique index on active
pairs turns a concurrent second accept into a Conflict.
"""
from datetime import datetime
from sqlalchemy.exc import IntegrityError
from models import (db, User, Startup, MentorshipRequest, MentorshipRelationship, Role,
                    StartupStatus, ReviewStatus, Initiator, RelationshipStatus)
from .errors import BadRequest, Forbidden, NotFound, Conflict

DUPLICATE_REQUEST = 'A mentorship request already exists for this mentor and startup'
ALREADY_MENTORING = 'This mentor is already mentoring this startup'


def get_request(request_id):
    mentorship_request = db.session.get(MentorshipRequest, request_id)
    if mentorship_request is None:
        raise NotFound('Request not found')
    return mentorship_request


def get_relationship(relationship_id):
    relationship = db.session.get(MentorshipRelationship, relationship_id)
    if relationship is None:
        raise NotFound('Relationship not found')
    return relationship


def get_participant_relationship(caller, relationship_id):
    """Load a relationship the caller takes part in, as mentor or startup owner"""
    relationship = get_relationship(relationship_id)
    if not relationship.is_participant(caller.user_id):
        raise Forbidden('You do not have access to this session')
    return relationship


def create_request(caller, initiated_by, mentor_id, startup_id, message=None):
    """
    Open a mentorship request.

    A MENTOR-initiated request is made by the calling mentor for any approved
    startup. A STARTUP-initiated request is made by the startup owner towards
    an enabled mentor.
    """
    if initiated_by == Initiator.MENTOR:
        if caller.role != Role.MENTOR:
            raise Forbidden('Mentor access required')
        mentor_id = caller.user_id
    elif initiated_by != Initiator.STARTUP:
        raise BadRequest(f"Unknown initiator: {initiated_by}")

    if not startup_id or not mentor_id:
        raise BadRequest('Mentor ID and Startup ID are required')

    startup = db.session.get(Startup, startup_id)
    if startup is None:
        raise NotFound('Startup not found')

    if initiated_by == Initiator.STARTUP:
        if startup.innovator_id != caller.user_id:
            raise Forbidden('You can only request mentorship for your own startups')
        mentor = db.session.get(User, mentor_id)
        if mentor is None or mentor.role != Role.MENTOR or mentor.is_disabled:
            raise NotFound('Mentor not found')

    if startup.status != StartupStatus.APPROVED:
        raise Conflict('Only approved startups can take part in mentorship')
    if startup.innovator_id == mentor_id:
        raise Conflict('Mentors cannot mentor their own startup')

    if MentorshipRequest.query.filter_by(mentor_id=mentor_id, startup_id=startup_id).first():
        raise Conflict(DUPLICATE_REQUEST)
    if MentorshipRelationship.query.filter_by(mentor_id=mentor_id, startup_id=startup_id,
                                              status=RelationshipStatus.ACTIVE).first():
        raise Conflict(ALREADY_MENTORING)

    mentorship_request = MentorshipRequest(
        mentor_id=mentor_id,
        startup_id=startup_id,
        initiated_by=initiated_by,
        message=message or None,
        status=ReviewStatus.PENDING
    )
    db.session.add(mentorship_request)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise Conflict(DUPLICATE_REQUEST)

    print(f"[Mentorship] Request {mentorship_request.id} opened by {initiated_by} "
          f"(mentor {mentor_id}, startup {startup_id})")
    return mentorship_request


def counterpart_id(mentorship_request):
    """The user allowed to decide on a request"""
    if mentorship_request.initiated_by == Initiator.MENTOR:
        return mentorship_request.startup.innovator_id
    return mentorship_request.mentor_id


def decide_request(caller, request_id, decision, response=None):
    """
    Accept or decline a pending request.

    Returns:
        tuple: (request, relationship); relationship is None when declined
    """
    decision = (decision or '').upper()
    if decision not in (ReviewStatus.APPROVED, ReviewStatus.REJECTED):
        raise BadRequest('Decision must be APPROVED or REJECTED')

    mentorship_request = get_request(request_id)
    if caller.user_id != counterpart_id(mentorship_request):
        raise Forbidden('You do not have permission to respond to this request')
    if mentorship_request.status != ReviewStatus.PENDING:
        raise Conflict(f"Request has already been {mentorship_request.status.lower()}")

    mentorship_request.status = decision
    mentorship_request.response = response or None
    mentorship_request.decided_at = datetime.utcnow()

    relationship = None
    if decision == ReviewStatus.APPROVED:
        relationship = MentorshipRelationship(
            mentor_id=mentorship_request.mentor_id,
            startup_id=mentorship_request.startup_id,
            request_id=mentorship_request.id,
            status=RelationshipStatus.ACTIVE
        )
        db.session.add(relationship)

    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise Conflict(ALREADY_MENTORING)

    print(f"[Mentorship] Request {mentorship_request.id} {decision} by user {caller.user_id}")
    if relationship is not None:
        print(f"[Mentorship] Relationship {relationship.id} is now active")
    return mentorship_request, relationship


def accept_request(caller, request_id, response=None):
    return decide_request(caller, request_id, ReviewStatus.APPROVED, response)


def decline_request(caller, request_id, response=None):
    return decide_request(caller, request_id, ReviewStatus.REJECTED, response)


def end_relationship(caller, relationship_id):
    relationship = get_participant_relationship(caller, relationship_id)
    if relationship.status != RelationshipStatus.ACTIVE:
        raise Conflict('Relationship has already ended')

    relationship.status = RelationshipStatus.ENDED
    relationship.ended_at = datetime.utcnow()
    db.session.commit()
    print(f"[Mentorship] Relationship {relationship.id} ended by user {caller.user_id}")
    return relationship


def requests_for_mentor(caller):
    return (MentorshipRequest.query.filter_by(mentor_id=caller.user_id)
            .order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc()).all())


def requests_for_owner(caller):
    """Requests on any startup the caller owns"""
    return (MentorshipRequest.query.join(Startup)
            .filter(Startup.innovator_id == caller.user_id)
            .order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc()).all())


def all_requests(status=None):
    query = MentorshipRequest.query
    if status:
        query = query.filter(MentorshipRequest.status == status.upper())
    return query.order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc()).all()


def relationships_for_mentor(caller, status=RelationshipStatus.ACTIVE):
    query = MentorshipRelationship.query.filter_by(mentor_id=caller.user_id)
    if status:
        query = query.filter_by(status=status)
    return query.order_by(MentorshipRelationship.created_at.desc()).all()


def relationships_for_owner(caller, status=RelationshipStatus.ACTIVE):
    query = (MentorshipRelationship.query.join(Startup)
             .filter(Startup.innovator_id == caller.user_id))
    if status:
        query = query.filter(MentorshipRelationship.status == status)
    return query.order_by(MentorshipRelationship.created_at.desc()).all()
