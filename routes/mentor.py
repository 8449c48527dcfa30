from flask import Blueprint, jsonify, request, g
from services import login_required, mentor_required
from services import mentors as mentor_service
from services import mentorship as mentorship_service
from services import startups as startup_service
from utils import get_json_body, parse_int

mentor_bp = Blueprint('mentor', __name__, url_prefix='/api')

@mentor_bp.route('/mentors')
def list_mentors():
    """Public mentor directory"""
    mentors = mentor_service.list_mentors()
    response = jsonify({'mentors': [m.to_dict(include_profile=True) for m in mentors]})
    response.headers['Cache-Control'] = 'no-store'
    return response

@mentor_bp.route('/mentor/apply', methods=['POST'])
@login_required
def apply():
    application = mentor_service.apply(g.caller, get_json_body())
    return jsonify({
        'message': 'Your mentor application has been submitted successfully and is pending review.',
        'applicationId': application.id
    }), 201

@mentor_bp.route('/mentor/profile', methods=['GET', 'PUT'])
@mentor_required
def profile():
    if request.method == 'PUT':
        mentor_profile = mentor_service.update_profile(g.caller, get_json_body())
        return jsonify({'message': 'Profile updated', 'profile': mentor_profile.to_dict()})
    return jsonify({'profile': mentor_service.get_profile(g.caller).to_dict()})

@mentor_bp.route('/mentor/startups')
@mentor_required
def discover_startups():
    """Approved startups a mentor can offer to mentor"""
    page = parse_int(request.args.get('page'), 'page', default=1, minimum=1)
    limit = parse_int(request.args.get('limit'), 'limit', default=12, minimum=1)
    startups, total = startup_service.discover_startups(
        category=request.args.get('category'),
        stage=request.args.get('stage'),
        project_type=request.args.get('projectType'),
        page=page,
        limit=limit
    )
    return jsonify({
        'startups': [s.to_dict() for s in startups],
        'pagination': {
            'page': page,
            'limit': limit,
            'total': total,
            'totalPages': (total + limit - 1) // limit
        }
    })

@mentor_bp.route('/mentor/relationships')
@mentor_required
def relationships():
    """Active mentorships of the calling mentor"""
    items = mentorship_service.relationships_for_mentor(g.caller)
    return jsonify({'relationships': [r.to_dict() for r in items]})
