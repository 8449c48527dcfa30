import json
from models import db, Startup, StartupNews, StartupStatus, MentorshipRequest, MentorshipRelationship
from .errors import BadRequest, Forbidden, NotFound, Conflict

# JSON key -> column for the free-form startup fields
STARTUP_FIELDS = {
    'title': 'title',
    'description': 'description',
    'category': 'category',
    'stage': 'stage',
    'projectType': 'project_type',
    'companyName': 'company_name',
    'university': 'university',
    'problem': 'problem',
    'solution': 'solution',
    'targetCustomers': 'target_customers',
    'milestones': 'milestones',
    'demoVideoUrl': 'demo_video_url',
    'email': 'contact_email',
    'linkedIn': 'contact_linkedin',
    'website': 'contact_website',
}

# Statuses hidden from the public listing unless a filter asks for them
HIDDEN_FROM_PUBLIC = (StartupStatus.PENDING, StartupStatus.REJECTED,
                      StartupStatus.FINISHED, StartupStatus.ARCHIVED)


def get_startup(startup_id):
    startup = db.session.get(Startup, startup_id)
    if startup is None:
        raise NotFound('Startup not found')
    return startup


def _parse_team_members(value):
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            raise BadRequest('Invalid team members data')
    if not isinstance(value, list):
        raise BadRequest('Invalid team members data')
    return json.dumps(value)


def submit_startup(caller, data):
    """Create a PENDING startup owned by the caller"""
    title = (data.get('title') or '').strip()
    description = (data.get('description') or '').strip()
    if not title or not description:
        raise BadRequest('Title and description are required')

    fields = {column: data.get(key) for key, column in STARTUP_FIELDS.items() if data.get(key)}
    fields.update(title=title, description=description)

    startup = Startup(
        innovator_id=caller.user_id,
        team_members=_parse_team_members(data.get('teamMembers')),
        status=StartupStatus.PENDING,
        **fields
    )
    db.session.add(startup)
    db.session.commit()

    print(f"[Startups] Startup {startup.id} submitted by user {caller.user_id}, pending approval")
    return startup


def _transition(startup, new_status, allowed_from, error_message):
    if startup.status not in allowed_from:
        raise Conflict(error_message)
    old_status = startup.status
    startup.status = new_status
    db.session.commit()
    print(f"[Startups] Startup {startup.id}: {old_status} -> {new_status}")
    return startup


def approve_startup(startup_id):
    return _transition(get_startup(startup_id), StartupStatus.APPROVED,
                       (StartupStatus.PENDING, StartupStatus.REJECTED),
                       'Only pending or rejected startups can be approved')


def reject_startup(startup_id):
    return _transition(get_startup(startup_id), StartupStatus.REJECTED,
                       (StartupStatus.PENDING, StartupStatus.APPROVED),
                       'Only pending or approved startups can be rejected')


def finish_startup(startup_id):
    return _transition(get_startup(startup_id), StartupStatus.FINISHED,
                       (StartupStatus.APPROVED,),
                       'Only approved startups can be marked as finished')


def archive_startup(caller, startup_id):
    startup = get_startup(startup_id)
    if startup.innovator_id != caller.user_id:
        raise Forbidden('You can only archive your own startups')
    return _transition(startup, StartupStatus.ARCHIVED, (StartupStatus.APPROVED,),
                       'Only approved startups can be archived')


def delete_startup(startup_id):
    startup = get_startup(startup_id)

    # Requests and relationships keep history that calls and messages point at
    has_history = (
        MentorshipRequest.query.filter_by(startup_id=startup.id).first() is not None
        or MentorshipRelationship.query.filter_by(startup_id=startup.id).first() is not None
    )
    if has_history:
        raise Conflict('Startup has mentorship history; archive or finish it instead')

    db.session.delete(startup)
    db.session.commit()
    print(f"[Startups] Startup {startup_id} deleted")


def list_startups(status=None, innovator_id=None, include_archived=False):
    """Public listing; by default only startups open for mentoring are shown"""
    query = Startup.query

    if status and status.lower() != 'all':
        query = query.filter(Startup.status == status.upper())
    elif not include_archived and innovator_id is None and not status:
        query = query.filter(Startup.status.notin_(HIDDEN_FROM_PUBLIC))

    if innovator_id is not None:
        query = query.filter(Startup.innovator_id == innovator_id)

    return query.order_by(Startup.created_at.desc(), Startup.id.desc()).all()


def discover_startups(category=None, stage=None, project_type=None, page=1, limit=12):
    """Approved startups for mentors to browse, paginated"""
    query = Startup.query.filter(Startup.status == StartupStatus.APPROVED)
    if category:
        query = query.filter(Startup.category == category)
    if stage:
        query = query.filter(Startup.stage == stage)
    if project_type:
        query = query.filter(Startup.project_type == project_type)

    total = query.count()
    startups = (query.order_by(Startup.created_at.desc(), Startup.id.desc())
                .offset((page - 1) * limit).limit(limit).all())
    return startups, total


def list_news(startup_id):
    """Public feed of a startup's updates, newest first"""
    startup = get_startup(startup_id)
    return (StartupNews.query.filter_by(startup_id=startup.id)
            .order_by(StartupNews.created_at.desc(), StartupNews.id.desc()).all())


def _get_news(startup, news_id):
    news = db.session.get(StartupNews, news_id)
    if news is None or news.startup_id != startup.id:
        raise NotFound('News item not found')
    return news


def create_news(caller, startup_id, title, content):
    if not title or not content:
        raise BadRequest('Title and content are required')
    startup = get_startup(startup_id)
    if startup.innovator_id != caller.user_id:
        raise Forbidden('Only the innovator can post updates for this startup')

    news = StartupNews(startup_id=startup.id, title=title, content=content)
    db.session.add(news)
    db.session.commit()
    print(f"[Startups] News {news.id} posted for startup {startup.id}")
    return news


def update_news(caller, startup_id, news_id, title=None, content=None):
    """Owner edit; omitted fields stay as they are"""
    startup = get_startup(startup_id)
    news = _get_news(startup, news_id)
    if startup.innovator_id != caller.user_id:
        raise Forbidden('Only the innovator can edit this update')
    if title == '' or content == '':
        raise BadRequest('Title and content cannot be empty')

    if title is not None:
        news.title = title
    if content is not None:
        news.content = content
    db.session.commit()
    return news


def delete_news(caller, startup_id, news_id):
    startup = get_startup(startup_id)
    news = _get_news(startup, news_id)
    if startup.innovator_id != caller.user_id:
        raise Forbidden('Only the innovator can delete this update')

    db.session.delete(news)
    db.session.commit()
    print(f"[Startups] News {news_id} deleted from startup {startup.id}")
