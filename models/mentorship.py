from datetime import datetime
from .database import db, isoformat
from .constants import ReviewStatus, RelationshipStatus

_ACTIVE_RELATIONSHIP = db.text("status = 'ACTIVE'")

class MentorshipRequest(db.Model):
    """A proposal, made by a mentor or by a startup owner, to start mentoring."""
    id = db.Column(db.Integer, primary_key=True)
    mentor_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    startup_id = db.Column(db.Integer, db.ForeignKey('startup.id'), nullable=False)
    initiated_by = db.Column(db.String(20), nullable=False)  # MENTOR, STARTUP
    message = db.Column(db.Text)
    response = db.Column(db.Text)
    status = db.Column(db.String(20), nullable=False, default=ReviewStatus.PENDING)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    decided_at = db.Column(db.DateTime)

    mentor = db.relationship('User', foreign_keys=[mentor_id])
    startup = db.relationship('Startup')

    __table_args__ = (
        db.UniqueConstraint('mentor_id', 'startup_id', name='uq_mentorship_request_pair'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'mentorId': self.mentor_id,
            'startupId': self.startup_id,
            'initiatedBy': self.initiated_by,
            'message': self.message,
            'response': self.response,
            'status': self.status,
            'createdAt': isoformat(self.created_at),
            'decidedAt': isoformat(self.decided_at),
            'mentor': {'id': self.mentor.id, 'name': self.mentor.name, 'email': self.mentor.email} if self.mentor else None,
            'startup': {'id': self.startup.id, 'title': self.startup.title,
                        'innovatorId': self.startup.innovator_id} if self.startup else None,
        }


class MentorshipRelationship(db.Model):
    """An accepted mentor/startup pairing that hosts calls, messages and notes."""
    id = db.Column(db.Integer, primary_key=True)
    mentor_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    startup_id = db.Column(db.Integer, db.ForeignKey('startup.id'), nullable=False)
    request_id = db.Column(db.Integer, db.ForeignKey('mentorship_request.id'))
    status = db.Column(db.String(20), nullable=False, default=RelationshipStatus.ACTIVE)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    ended_at = db.Column(db.DateTime)

    mentor = db.relationship('User', foreign_keys=[mentor_id])
    startup = db.relationship('Startup')
    scheduled_calls = db.relationship('ScheduledCall', backref='relationship', lazy=True)

    # Concurrent accepts must not produce two active pairings
    __table_args__ = (
        db.Index('uq_active_relationship_pair', 'mentor_id', 'startup_id', unique=True,
                 sqlite_where=_ACTIVE_RELATIONSHIP, postgresql_where=_ACTIVE_RELATIONSHIP),
    )

    def participant_ids(self):
        return {self.mentor_id, self.startup.innovator_id}

    def is_participant(self, user_id):
        return user_id in self.participant_ids()

    def to_dict(self):
        return {
            'id': self.id,
            'mentorId': self.mentor_id,
            'startupId': self.startup_id,
            'requestId': self.request_id,
            'status': self.status,
            'createdAt': isoformat(self.created_at),
            'endedAt': isoformat(self.ended_at),
            'mentor': {'id': self.mentor.id, 'name': self.mentor.name, 'email': self.mentor.email},
            'startup': {'id': self.startup.id, 'title': self.startup.title,
                        'innovatorId': self.startup.innovator_id},
        }
