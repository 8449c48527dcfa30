from collections import namedtuple
from functools import wraps
from flask import session, g, current_app
from itsdangerous import URLSafeTimedSerializer, BadSignature
from werkzeug.security import generate_password_hash, check_password_hash
from models import db, User, Role
from .errors import BadRequest, Unauthorized, Forbidden, Conflict

# Resolved identity passed explicitly into every transition function
Caller = namedtuple('Caller', ['user_id', 'role'])

ADMIN_TOKEN_SALT = 'admin-session'

def get_serializer():
    """Get the token serializer"""
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'])

def generate_admin_token(user_id):
    """Generate a signed admin session token"""
    return get_serializer().dumps(user_id, salt=ADMIN_TOKEN_SALT)

def verify_admin_token(token, max_age=None):
    """Verify and decode an admin session token, None when invalid or expired"""
    if not token:
        return None
    if max_age is None:
        max_age = current_app.config['ADMIN_SESSION_MAX_AGE']
    try:
        return get_serializer().loads(token, salt=ADMIN_TOKEN_SALT, max_age=max_age)
    except BadSignature:
        return None

def register_user(name, email, password):
    email = (email or '').strip().lower()
    if not email or not password:
        raise BadRequest('Email and password are required')
    if User.query.filter_by(email=email).first():
        raise Conflict('An account with this email already exists')

    user = User(name=(name or '').strip() or None,
                email=email,
                password_hash=generate_password_hash(password),
                role=Role.USER)
    db.session.add(user)
    db.session.commit()
    print(f"[Auth] Registered user {user.id} ({email})")
    return user

def authenticate(email, password):
    """Return the user for valid credentials, raise otherwise"""
    if not email or not password:
        raise BadRequest('Email and password are required')

    user = User.query.filter_by(email=email.strip().lower()).first()
    if not user or not check_password_hash(user.password_hash, password):
        raise Unauthorized('Invalid email or password')
    if user.is_disabled:
        raise Forbidden('Account is disabled')
    return user

def resolve_caller():
    """Resolve the caller from the signed session cookie"""
    user_id = session.get('user_id')
    if user_id is None:
        raise Unauthorized()

    user = db.session.get(User, user_id)
    if user is None:
        raise Unauthorized()
    if user.is_disabled:
        raise Forbidden('Account is disabled')
    return Caller(user.id, user.role)

def login_required(f):
    """Decorator to require a logged in user"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        g.caller = resolve_caller()
        return f(*args, **kwargs)
    return decorated_function

def mentor_required(f):
    """Decorator to require a logged in mentor"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        caller = resolve_caller()
        if caller.role != Role.MENTOR:
            raise Forbidden('Mentor access required')
        g.caller = caller
        return f(*args, **kwargs)
    return decorated_function

def admin_required(f):
    """Decorator to require an admin with a valid admin session token"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        caller = resolve_caller()
        if caller.role != Role.ADMIN:
            raise Forbidden('Access denied. Admin privileges required.')
        if not has_admin_session(caller):
            raise Unauthorized('Admin session expired')
        g.caller = caller
        return f(*args, **kwargs)
    return decorated_function

def has_admin_session(caller):
    """True when the caller is an admin holding a valid admin token"""
    return (caller.role == Role.ADMIN
            and verify_admin_token(session.get('admin_token')) == caller.user_id)
