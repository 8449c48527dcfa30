import json
from datetime import datetime
from .database import db, isoformat
from .constants import StartupStatus

class Startup(db.Model):
    """Database model for an innovator's startup submission."""
    id = db.Column(db.Integer, primary_key=True)
    innovator_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100))
    stage = db.Column(db.String(50))
    project_type = db.Column(db.String(50))
    company_name = db.Column(db.String(200))
    university = db.Column(db.String(200))

    # Pitch content
    problem = db.Column(db.Text)
    solution = db.Column(db.Text)
    target_customers = db.Column(db.Text)
    milestones = db.Column(db.Text)
    team_members = db.Column(db.Text)  # JSON list
    demo_video_url = db.Column(db.String(500))

    # Contact
    contact_email = db.Column(db.String(255))
    contact_linkedin = db.Column(db.String(255))
    contact_website = db.Column(db.String(255))

    # PENDING, APPROVED, REJECTED, FINISHED, ARCHIVED
    status = db.Column(db.String(20), nullable=False, default=StartupStatus.PENDING)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    news = db.relationship('StartupNews', backref='startup', lazy=True,
                           cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'innovatorId': self.innovator_id,
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'stage': self.stage,
            'projectType': self.project_type,
            'companyName': self.company_name,
            'university': self.university,
            'problem': self.problem,
            'solution': self.solution,
            'targetCustomers': self.target_customers,
            'milestones': self.milestones,
            'teamMembers': json.loads(self.team_members) if self.team_members else [],
            'demoVideoUrl': self.demo_video_url,
            'contactEmail': self.contact_email,
            'contactLinkedIn': self.contact_linkedin,
            'contactWebsite': self.contact_website,
            'status': self.status,
            'createdAt': isoformat(self.created_at),
        }
