from datetime import datetime
from sqlalchemy.exc import IntegrityError
from models import db, User, MentorProfile, MentorApplication, Role, ReviewStatus
from .errors import BadRequest, NotFound, Conflict

# Application fields copied onto the mentor profile at approval
PROFILE_FIELDS = ('bio', 'expertise', 'experience', 'company', 'availability',
                  'mentor_type', 'languages', 'linkedin')

# Profile columns whose JSON key differs from the column name
PROFILE_KEYS = {'mentor_type': 'mentorType'}

ADMIN_NOT_MENTOR = 'Admins cannot be converted to mentors'
OPEN_APPLICATION_EXISTS = 'User already has an open mentor application'


def get_application(application_id):
    application = db.session.get(MentorApplication, application_id)
    if application is None:
        raise NotFound('Application not found')
    return application


def get_mentor(mentor_id):
    """Load a user that must currently hold the MENTOR role"""
    mentor = db.session.get(User, mentor_id)
    if mentor is None:
        raise NotFound('Mentor not found')
    if mentor.role != Role.MENTOR:
        raise Conflict('User is not a mentor')
    return mentor


def apply(caller, data):
    """Submit a mentor application for the caller"""
    bio = (data.get('bio') or '').strip()
    expertise = (data.get('expertise') or '').strip()
    experience = (data.get('experience') or '').strip()
    if not bio or not expertise or not experience:
        raise BadRequest('Bio, expertise, and experience are required')

    existing = MentorApplication.query.filter(
        MentorApplication.user_id == caller.user_id,
        MentorApplication.status.in_((ReviewStatus.PENDING, ReviewStatus.APPROVED))
    ).first()
    if existing:
        if existing.status == ReviewStatus.APPROVED:
            raise Conflict('You are already an approved mentor')
        raise Conflict('You already have a pending application')

    mentor_type = data.get('mentorType')
    if mentor_type == 'other':
        mentor_type = data.get('mentorTypeOther')

    application = MentorApplication(
        user_id=caller.user_id,
        bio=bio,
        expertise=expertise,
        experience=experience,
        portfolio_url=data.get('portfolioUrl') or None,
        company=data.get('company') or None,
        availability=data.get('availability') or None,
        mentor_type=mentor_type or None,
        languages=data.get('languages') or None,
        linkedin=data.get('linkedinUrl') or None,
        status=ReviewStatus.PENDING
    )
    db.session.add(application)
    db.session.commit()

    print(f"[Mentors] Application {application.id} submitted by user {caller.user_id}")
    return application


def approve_application(application_id):
    """Grant the MENTOR role, upsert the profile and approve, in one transaction"""
    application = get_application(application_id)
    if application.status not in (ReviewStatus.PENDING, ReviewStatus.REJECTED):
        raise Conflict('Application is already approved')
    if application.user.role == Role.ADMIN:
        raise Conflict(ADMIN_NOT_MENTOR)

    # One open (pending or approved) application per user
    other_open = MentorApplication.query.filter(
        MentorApplication.user_id == application.user_id,
        MentorApplication.id != application.id,
        MentorApplication.status.in_((ReviewStatus.PENDING, ReviewStatus.APPROVED))
    ).first()
    if other_open:
        raise Conflict(OPEN_APPLICATION_EXISTS)

    try:
        user = application.user
        user.role = Role.MENTOR

        profile = user.mentor_profile
        if profile is None:
            profile = MentorProfile(user_id=user.id)
            db.session.add(profile)
        for field in PROFILE_FIELDS:
            setattr(profile, field, getattr(application, field))
        if not profile.availability:
            profile.availability = 'available'

        application.status = ReviewStatus.APPROVED
        application.reviewed_at = datetime.utcnow()
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise Conflict(OPEN_APPLICATION_EXISTS)
    except Exception:
        db.session.rollback()
        raise

    print(f"[Mentors] Application {application.id} approved, user {application.user_id} is now a mentor")
    return application


def reject_application(application_id, admin_notes=None):
    """Revoke mentor access and reject, in one transaction"""
    application = get_application(application_id)
    if application.status not in (ReviewStatus.PENDING, ReviewStatus.APPROVED):
        raise Conflict('Application is already rejected')

    try:
        user = application.user
        if user.role == Role.MENTOR:
            user.role = Role.USER
        if user.mentor_profile is not None:
            db.session.delete(user.mentor_profile)

        application.status = ReviewStatus.REJECTED
        application.reviewed_at = datetime.utcnow()
        application.admin_notes = admin_notes or None
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    print(f"[Mentors] Application {application.id} rejected, mentor access revoked for user {application.user_id}")
    return application


def delete_application(application_id):
    application = get_application(application_id)
    db.session.delete(application)
    db.session.commit()


def list_applications(status=None):
    query = MentorApplication.query
    if status:
        query = query.filter(MentorApplication.status == status.upper())
    return query.order_by(MentorApplication.created_at.desc(), MentorApplication.id.desc()).all()


def toggle_mentor_disabled(mentor_id):
    mentor = get_mentor(mentor_id)
    mentor.is_disabled = not mentor.is_disabled
    db.session.commit()

    action = 'disabled' if mentor.is_disabled else 'enabled'
    print(f"[Admin] Mentor {mentor.id} {action}")
    return mentor


def promote_to_mentor(user_id):
    """Direct admin grant of the MENTOR role"""
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound('User not found')
    if user.role == Role.ADMIN:
        raise Conflict(ADMIN_NOT_MENTOR)
    user.role = Role.MENTOR
    if user.mentor_profile is None:
        # Placeholder the mentor fills in through the profile editor
        db.session.add(MentorProfile(user_id=user.id, bio='', expertise='', experience='',
                                     availability='available'))
    db.session.commit()
    print(f"[Admin] User {user.id} promoted to mentor")
    return user


def remove_mentor(mentor_id):
    """Revoke a mentor account's role and profile, keeping its mentorship history"""
    mentor = get_mentor(mentor_id)
    if mentor.mentor_profile is not None:
        db.session.delete(mentor.mentor_profile)
    mentor.role = Role.USER
    mentor.is_disabled = True
    db.session.commit()
    print(f"[Admin] Mentor {mentor.id} removed")


def list_mentors(include_disabled=False):
    """Users holding the MENTOR role that have a profile"""
    query = User.query.join(MentorProfile).filter(User.role == Role.MENTOR)
    if not include_disabled:
        query = query.filter(User.is_disabled.is_(False))
    return query.order_by(User.name).all()


def get_profile(caller):
    profile = MentorProfile.query.filter_by(user_id=caller.user_id).first()
    if profile is None:
        raise NotFound('Mentor profile not found')
    return profile


def update_profile(caller, data):
    profile = get_profile(caller)
    for field in MentorProfile.EDITABLE_FIELDS:
        key = PROFILE_KEYS.get(field, field)
        if key in data:
            setattr(profile, field, data[key])
    if not profile.bio or not profile.expertise or not profile.experience:
        db.session.rollback()
        raise BadRequest('Bio, expertise, and experience cannot be empty')
    db.session.commit()
    return profile
