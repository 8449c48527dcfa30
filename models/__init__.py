from .database import db
from .constants import (Role, StartupStatus, ReviewStatus, Initiator, RelationshipStatus,
                        CallStatus, OpportunityStatus)
from .user import User, MentorProfile
from .startup import Startup
from .startup_news import StartupNews
from .mentor_application import MentorApplication
from .mentorship import MentorshipRequest, MentorshipRelationship
from .scheduled_call import ScheduledCall
from .session_content import SessionMessage, SessionNote
from .funding import FundingOpportunity, FundingApplication

__all__ = ['db', 'Role', 'StartupStatus', 'ReviewStatus', 'Initiator', 'RelationshipStatus',
           'CallStatus', 'OpportunityStatus', 'User', 'MentorProfile', 'Startup', 'StartupNews',
           'MentorApplication', 'MentorshipRequest', 'MentorshipRelationship', 'ScheduledCall',
           'SessionMessage', 'SessionNote', 'FundingOpportunity', 'FundingApplication']
