from datetime import datetime
from .database import db, isoformat
from .constants import Role

class User(db.Model):
    """Database model for every account: innovators, mentors and admins."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100))
    email = db.Column(db.String(255), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default=Role.USER)  # USER, MENTOR, ADMIN
    is_disabled = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    mentor_profile = db.relationship('MentorProfile', backref='user', uselist=False,
                                     cascade='all, delete-orphan')
    startups = db.relationship('Startup', backref='innovator', lazy=True)

    @property
    def is_mentor(self):
        return self.role == Role.MENTOR

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    def to_dict(self, include_profile=False):
        data = {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'isDisabled': self.is_disabled,
            'createdAt': isoformat(self.created_at),
        }
        if include_profile:
            data['mentorProfile'] = self.mentor_profile.to_dict() if self.mentor_profile else None
        return data


class MentorProfile(db.Model):
    """Public mentor profile, created when a mentor application is approved."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, unique=True)
    bio = db.Column(db.Text, nullable=False)
    expertise = db.Column(db.Text, nullable=False)
    experience = db.Column(db.Text, nullable=False)
    company = db.Column(db.String(200))
    availability = db.Column(db.String(100), default='available')
    mentor_type = db.Column(db.String(100))
    languages = db.Column(db.String(200))
    linkedin = db.Column(db.String(255))
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    EDITABLE_FIELDS = ('bio', 'expertise', 'experience', 'company', 'availability',
                       'mentor_type', 'languages', 'linkedin')

    def to_dict(self):
        return {
            'bio': self.bio,
            'expertise': self.expertise,
            'experience': self.experience,
            'company': self.company,
            'availability': self.availability,
            'mentorType': self.mentor_type,
            'languages': self.languages,
            'linkedin': self.linkedin,
        }
