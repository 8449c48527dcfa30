from flask import Blueprint, jsonify, session, g
from models import db, User
from services.auth import register_user, authenticate, generate_admin_token, login_required
from utils import get_json_body

auth_bp = Blueprint('auth', __name__, url_prefix='/api')

@auth_bp.route('/auth/register', methods=['POST'])
def register():
    """Create a USER account and log it in"""
    data = get_json_body()
    user = register_user(data.get('name'), data.get('email'), data.get('password'))

    session.clear()
    session['user_id'] = user.id
    return jsonify({'message': 'Registration successful', 'user': user.to_dict()}), 201

@auth_bp.route('/auth/login', methods=['POST'])
def login():
    """Log in any user; admins also receive a time limited admin token"""
    data = get_json_body()
    user = authenticate(data.get('email'), data.get('password'))

    session.clear()
    session['user_id'] = user.id
    if user.is_admin:
        session['admin_token'] = generate_admin_token(user.id)

    print(f"[Auth] User {user.id} logged in as {user.role}")
    return jsonify({'message': 'Login successful', 'user': user.to_dict()})

@auth_bp.route('/auth/logout', methods=['POST'])
def logout():
    session.clear()
    return jsonify({'message': 'Logged out'})

@auth_bp.route('/user/role')
@login_required
def user_role():
    user = db.session.get(User, g.caller.user_id)
    return jsonify({
        'role': user.role,
        'userId': user.id,
        'name': user.name,
        'email': user.email
    })
