from datetime import datetime
from .database import db, isoformat
from .constants import ReviewStatus

_OPEN_APPLICATION = db.text("status IN ('PENDING', 'APPROVED')")

class MentorApplication(db.Model):
    """Database model for a user's request to become a mentor."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    bio = db.Column(db.Text, nullable=False)
    expertise = db.Column(db.Text, nullable=False)
    experience = db.Column(db.Text, nullable=False)
    portfolio_url = db.Column(db.String(255))
    company = db.Column(db.String(200))
    availability = db.Column(db.String(100))
    mentor_type = db.Column(db.String(100))
    languages = db.Column(db.String(200))
    linkedin = db.Column(db.String(255))

    status = db.Column(db.String(20), nullable=False, default=ReviewStatus.PENDING)
    admin_notes = db.Column(db.Text)
    reviewed_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship('User', backref=db.backref('mentor_applications', lazy=True))

    # One open (pending or approved) application per user
    __table_args__ = (
        db.Index('uq_mentor_application_open', 'user_id', unique=True,
                 sqlite_where=_OPEN_APPLICATION, postgresql_where=_OPEN_APPLICATION),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'user': {'id': self.user.id, 'name': self.user.name, 'email': self.user.email} if self.user else None,
            'bio': self.bio,
            'expertise': self.expertise,
            'experience': self.experience,
            'portfolioUrl': self.portfolio_url,
            'company': self.company,
            'availability': self.availability,
            'mentorType': self.mentor_type,
            'languages': self.languages,
            'linkedin': self.linkedin,
            'status': self.status,
            'adminNotes': self.admin_notes,
            'reviewedAt': isoformat(self.reviewed_at),
            'createdAt': isoformat(self.created_at),
        }
