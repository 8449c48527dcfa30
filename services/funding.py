"""
Funding opportunities and applications.

Status decisions on applications are an unconditional admin overwrite:
any of PENDING, APPROVED and REJECTED may follow any other.
"""
from sqlalchemy.exc import IntegrityError
from models import db, FundingOpportunity, FundingApplication, Startup, ReviewStatus, OpportunityStatus
from utils.helpers import require_fields, parse_datetime, parse_int, dump_json_list
from .errors import BadRequest, Forbidden, NotFound, Conflict

DUPLICATE_APPLICATION = 'You have already submitted an application for this opportunity'

# JSON key -> column for optional applicant details
APPLICANT_FIELDS = {
    'fullName': 'full_name',
    'phoneNumber': 'phone_number',
    'country': 'country',
    'companyName': 'company_name',
    'companyWebsite': 'company_website',
    'companyDescription': 'company_description',
    'companyStage': 'company_stage',
}


def get_opportunity(opportunity_id):
    opportunity = db.session.get(FundingOpportunity, opportunity_id)
    if opportunity is None:
        raise NotFound('Funding opportunity not found')
    return opportunity


def list_opportunities(opportunity_id=None, status=None):
    query = FundingOpportunity.query
    if opportunity_id is not None:
        query = query.filter(FundingOpportunity.id == opportunity_id)
    if status:
        query = query.filter(FundingOpportunity.status == status.upper())
    return query.order_by(FundingOpportunity.created_at.desc(), FundingOpportunity.id.desc()).all()


def create_opportunity(data):
    require_fields(data, 'title', 'description', 'providerName', 'amount', 'deadline')

    opportunity = FundingOpportunity(
        title=data['title'],
        description=data['description'],
        provider_name=data['providerName'],
        amount=parse_int(data['amount'], 'amount', minimum=0),
        deadline=parse_datetime(data['deadline'], 'deadline'),
        requirements=dump_json_list(data.get('requirements')) or '[]',
        status=OpportunityStatus.ACTIVE
    )
    db.session.add(opportunity)
    db.session.commit()
    print(f"[Funding] Opportunity {opportunity.id} created: {opportunity.title}")
    return opportunity


def update_opportunity(opportunity_id, data):
    opportunity = get_opportunity(opportunity_id)

    for key, column in (('title', 'title'), ('description', 'description'), ('providerName', 'provider_name')):
        if data.get(key):
            setattr(opportunity, column, data[key])
    if data.get('amount') not in (None, ''):
        opportunity.amount = parse_int(data['amount'], 'amount', minimum=0)
    if data.get('deadline'):
        opportunity.deadline = parse_datetime(data['deadline'], 'deadline')
    if data.get('requirements') is not None:
        opportunity.requirements = dump_json_list(data['requirements']) or '[]'
    if data.get('status'):
        status = data['status'].upper()
        if status not in OpportunityStatus.ALL:
            raise BadRequest('Invalid status. Must be ACTIVE or CLOSED')
        opportunity.status = status

    db.session.commit()
    return opportunity


def delete_opportunity(opportunity_id):
    opportunity = get_opportunity(opportunity_id)
    db.session.delete(opportunity)
    db.session.commit()
    print(f"[Funding] Opportunity {opportunity_id} deleted")


def submit_application(caller, opportunity_id, data):
    """Apply to an opportunity as the caller; one PENDING application per opportunity"""
    if not opportunity_id or not data.get('message'):
        raise BadRequest('Missing required fields: opportunityId, message')
    opportunity = get_opportunity(opportunity_id)

    startup_id = data.get('startupId') or None
    if startup_id is not None:
        startup = db.session.get(Startup, startup_id)
        if startup is None:
            raise NotFound('Startup not found')
        if startup.innovator_id != caller.user_id:
            raise Forbidden('You can only apply with your own startups')

    duplicate = FundingApplication.query.filter_by(
        opportunity_id=opportunity.id,
        innovator_id=caller.user_id,
        status=ReviewStatus.PENDING
    ).first()
    if duplicate:
        raise Conflict(DUPLICATE_APPLICATION)

    application = FundingApplication(
        opportunity_id=opportunity.id,
        innovator_id=caller.user_id,
        startup_id=startup_id,
        message=data['message'],
        has_registered_company=bool(data.get('hasRegisteredCompany')),
        focus_area=dump_json_list(data.get('focusArea')),
        industry_focus=dump_json_list(data.get('industryFocus')),
        status=ReviewStatus.PENDING,
        **{column: data.get(key) or None for key, column in APPLICANT_FIELDS.items()}
    )
    db.session.add(application)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise Conflict(DUPLICATE_APPLICATION)

    print(f"[Funding] Application {application.id} submitted by user {caller.user_id} "
          f"for opportunity {opportunity.id}")
    return application


def decide_application(application_id, status):
    """Admin overwrite of an application's status"""
    if not application_id or not status:
        raise BadRequest('Missing required fields: id, status')
    status = status.upper()
    if status not in ReviewStatus.ALL:
        raise BadRequest('Invalid status. Must be PENDING, APPROVED, or REJECTED')

    application = db.session.get(FundingApplication, application_id)
    if application is None:
        raise NotFound('Funding application not found')

    application.status = status
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise Conflict('Another pending application exists for this opportunity and innovator')

    print(f"[Funding] Application {application.id} set to {status}")
    return application


def list_applications(caller, is_admin=False, opportunity_id=None, innovator_id=None,
                      startup_id=None, status=None):
    """Filtered listing; non-admins only ever see their own applications"""
    query = FundingApplication.query
    if not is_admin:
        innovator_id = caller.user_id

    if opportunity_id is not None:
        query = query.filter(FundingApplication.opportunity_id == opportunity_id)
    if innovator_id is not None:
        query = query.filter(FundingApplication.innovator_id == innovator_id)
    if startup_id is not None:
        query = query.filter(FundingApplication.startup_id == startup_id)
    if status:
        query = query.filter(FundingApplication.status == status.upper())

    return query.order_by(FundingApplication.created_at.desc(), FundingApplication.id.desc()).all()
