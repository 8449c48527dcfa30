import json
from datetime import datetime
from .database import db, isoformat
from .constants import ReviewStatus, OpportunityStatus

_PENDING_APPLICATION = db.text("status = 'PENDING'")

class FundingOpportunity(db.Model):
    """A funding offer innovators can apply to."""
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    provider_name = db.Column(db.String(200), nullable=False)
    amount = db.Column(db.Integer, nullable=False)
    deadline = db.Column(db.DateTime, nullable=False)
    requirements = db.Column(db.Text, default='[]')  # JSON list
    status = db.Column(db.String(20), nullable=False, default=OpportunityStatus.ACTIVE)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    applications = db.relationship('FundingApplication', backref='opportunity', lazy=True,
                                   cascade='all, delete-orphan')

    def to_dict(self, include_count=False):
        data = {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'providerName': self.provider_name,
            'amount': self.amount,
            'deadline': isoformat(self.deadline),
            'requirements': json.loads(self.requirements) if self.requirements else [],
            'status': self.status,
            'createdAt': isoformat(self.created_at),
        }
        if include_count:
            data['applicationCount'] = len(self.applications)
        return data


class FundingApplication(db.Model):
    """An innovator's application against a funding opportunity."""
    id = db.Column(db.Integer, primary_key=True)
    opportunity_id = db.Column(db.Integer, db.ForeignKey('funding_opportunity.id'), nullable=False)
    innovator_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    startup_id = db.Column(db.Integer, db.ForeignKey('startup.id'))
    message = db.Column(db.Text, nullable=False)

    # Applicant details
    full_name = db.Column(db.String(200))
    phone_number = db.Column(db.String(50))
    country = db.Column(db.String(100))
    has_registered_company = db.Column(db.Boolean, default=False)
    company_name = db.Column(db.String(200))
    company_website = db.Column(db.String(255))
    company_description = db.Column(db.Text)
    company_stage = db.Column(db.String(50))
    focus_area = db.Column(db.Text)  # JSON list
    industry_focus = db.Column(db.Text)  # JSON list

    status = db.Column(db.String(20), nullable=False, default=ReviewStatus.PENDING)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    innovator = db.relationship('User')

    __table_args__ = (
        db.Index('uq_pending_funding_application', 'opportunity_id', 'innovator_id', unique=True,
                 sqlite_where=_PENDING_APPLICATION, postgresql_where=_PENDING_APPLICATION),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'opportunityId': self.opportunity_id,
            'opportunity': {'id': self.opportunity.id, 'title': self.opportunity.title} if self.opportunity else None,
            'innovatorId': self.innovator_id,
            'innovatorName': self.innovator.name if self.innovator else None,
            'innovatorEmail': self.innovator.email if self.innovator else None,
            'startupId': self.startup_id,
            'message': self.message,
            'fullName': self.full_name,
            'phoneNumber': self.phone_number,
            'country': self.country,
            'hasRegisteredCompany': self.has_registered_company,
            'companyName': self.company_name,
            'companyWebsite': self.company_website,
            'companyDescription': self.company_description,
            'companyStage': self.company_stage,
            'focusArea': json.loads(self.focus_area) if self.focus_area else [],
            'industryFocus': json.loads(self.industry_focus) if self.industry_focus else [],
            'status': self.status,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
