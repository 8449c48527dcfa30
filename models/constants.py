"""Canonical status and role values stored in the database.

Values are always upper case. Legacy lower case rows are fixed by
migrate_db.py and the normalize_legacy_values revision, never at runtime.
"""


class Role:
    USER = 'USER'
    MENTOR = 'MENTOR'
    ADMIN = 'ADMIN'
    ALL = (USER, MENTOR, ADMIN)


class StartupStatus:
    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'
    FINISHED = 'FINISHED'
    ARCHIVED = 'ARCHIVED'
    ALL = (PENDING, APPROVED, REJECTED, FINISHED, ARCHIVED)


class ReviewStatus:
    """Shared by mentor applications, mentorship requests and funding applications."""
    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'
    ALL = (PENDING, APPROVED, REJECTED)


class Initiator:
    MENTOR = 'MENTOR'
    STARTUP = 'STARTUP'


class RelationshipStatus:
    ACTIVE = 'ACTIVE'
    ENDED = 'ENDED'


class CallStatus:
    PROPOSED = 'PROPOSED'
    CONFIRMED = 'CONFIRMED'
    DECLINED = 'DECLINED'
    COMPLETED = 'COMPLETED'


class OpportunityStatus:
    ACTIVE = 'ACTIVE'
    CLOSED = 'CLOSED'
    ALL = (ACTIVE, CLOSED)
