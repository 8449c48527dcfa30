from flask import Blueprint, jsonify, request
from services import admin_required
from services import startups as startup_service
from services import mentors as mentor_service
from services import mentorship as mentorship_service
from utils import get_json_body, parse_int

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')

@admin_bp.route('/startups')
@admin_required
def list_startups():
    """Every startup, optionally filtered by status"""
    startups = startup_service.list_startups(status=request.args.get('status') or 'all')
    return jsonify({'startups': [s.to_dict() for s in startups]})

@admin_bp.route('/startups/<int:startup_id>/approve', methods=['POST'])
@admin_required
def approve_startup(startup_id):
    startup = startup_service.approve_startup(startup_id)
    return jsonify({'message': 'Startup approved', 'startup': startup.to_dict()})

@admin_bp.route('/startups/<int:startup_id>/reject', methods=['POST'])
@admin_required
def reject_startup(startup_id):
    startup = startup_service.reject_startup(startup_id)
    return jsonify({'message': 'Startup rejected', 'startup': startup.to_dict()})

@admin_bp.route('/startups/<int:startup_id>/finish', methods=['POST'])
@admin_required
def finish_startup(startup_id):
    startup = startup_service.finish_startup(startup_id)
    return jsonify({'message': 'Startup marked as finished', 'startup': startup.to_dict()})

@admin_bp.route('/startups/<int:startup_id>', methods=['DELETE'])
@admin_required
def delete_startup(startup_id):
    startup_service.delete_startup(startup_id)
    return jsonify({'message': 'Startup deleted'})

@admin_bp.route('/mentor-applications')
@admin_required
def list_mentor_applications():
    applications = mentor_service.list_applications(status=request.args.get('status'))
    return jsonify({'applications': [a.to_dict() for a in applications]})

@admin_bp.route('/mentor-applications/<int:application_id>')
@admin_required
def get_mentor_application(application_id):
    return jsonify({'application': mentor_service.get_application(application_id).to_dict()})

@admin_bp.route('/mentor-applications/<int:application_id>', methods=['DELETE'])
@admin_required
def delete_mentor_application(application_id):
    mentor_service.delete_application(application_id)
    return jsonify({'message': 'Application deleted'})

@admin_bp.route('/mentor-applications/<int:application_id>/approve', methods=['POST'])
@admin_required
def approve_mentor_application(application_id):
    application = mentor_service.approve_application(application_id)
    return jsonify({'message': 'Application approved successfully', 'application': application.to_dict()})

@admin_bp.route('/mentor-applications/<int:application_id>/reject', methods=['POST'])
@admin_required
def reject_mentor_application(application_id):
    application = mentor_service.reject_application(application_id, get_json_body().get('adminNotes'))
    return jsonify({'message': 'Application rejected and mentor access revoked',
                    'application': application.to_dict()})

@admin_bp.route('/mentors')
@admin_required
def list_mentors():
    mentors = mentor_service.list_mentors(include_disabled=True)
    return jsonify({'mentors': [m.to_dict(include_profile=True) for m in mentors]})

@admin_bp.route('/mentors', methods=['POST'])
@admin_required
def promote_mentor():
    user_id = parse_int(get_json_body().get('userId'), 'userId')
    if user_id is None:
        return jsonify({'error': 'User ID is required'}), 400
    user = mentor_service.promote_to_mentor(user_id)
    return jsonify({'message': 'User approved as mentor', 'user': user.to_dict()})

@admin_bp.route('/mentors/<int:mentor_id>/disable', methods=['POST'])
@admin_required
def toggle_mentor(mentor_id):
    mentor = mentor_service.toggle_mentor_disabled(mentor_id)
    action = 'disabled' if mentor.is_disabled else 'enabled'
    return jsonify({'message': f'Mentor {action} successfully', 'mentor': mentor.to_dict()})

@admin_bp.route('/mentors/<int:mentor_id>', methods=['DELETE'])
@admin_required
def remove_mentor(mentor_id):
    mentor_service.remove_mentor(mentor_id)
    return jsonify({'message': 'Mentor removed successfully'})

@admin_bp.route('/mentorship-requests')
@admin_required
def list_mentorship_requests():
    requests = mentorship_service.all_requests(status=request.args.get('status'))
    return jsonify({'requests': [r.to_dict() for r in requests]})
