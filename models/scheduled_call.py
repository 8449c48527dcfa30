from datetime import datetime, timedelta
from .database import db, isoformat
from .constants import CallStatus

class ScheduledCall(db.Model):
    """A call proposed inside a mentorship relationship."""
    id = db.Column(db.Integer, primary_key=True)
    relationship_id = db.Column(db.Integer, db.ForeignKey('mentorship_relationship.id'), nullable=False)
    proposed_by_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    title = db.Column(db.String(200), default='Mentorship Call')
    description = db.Column(db.Text)
    scheduled_at = db.Column(db.DateTime, nullable=False)
    duration = db.Column(db.Integer, nullable=False, default=30)  # minutes
    meeting_url = db.Column(db.String(500))

    # PROPOSED, CONFIRMED, DECLINED, COMPLETED
    status = db.Column(db.String(20), nullable=False, default=CallStatus.PROPOSED)
    reminder_sent = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    proposed_by = db.relationship('User')

    @property
    def ends_at(self):
        return self.scheduled_at + timedelta(minutes=self.duration)

    def to_dict(self):
        return {
            'id': self.id,
            'relationshipId': self.relationship_id,
            'proposedById': self.proposed_by_id,
            'proposedBy': {'id': self.proposed_by.id, 'name': self.proposed_by.name,
                           'email': self.proposed_by.email} if self.proposed_by else None,
            'title': self.title,
            'description': self.description,
            'scheduledAt': isoformat(self.scheduled_at),
            'duration': self.duration,
            'meetingUrl': self.meeting_url,
            'status': self.status,
            'reminderSent': self.reminder_sent,
            'createdAt': isoformat(self.created_at),
        }
