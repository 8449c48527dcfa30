from flask import Blueprint, jsonify, g
from models import Initiator
from services import login_required, mentor_required
from services import mentorship as mentorship_service
from utils import get_json_body

mentorship_bp = Blueprint('mentorship', __name__, url_prefix='/api')

@mentorship_bp.route('/mentor/requests')
@mentor_required
def mentor_requests():
    """Requests addressed to or sent by the calling mentor"""
    requests = mentorship_service.requests_for_mentor(g.caller)
    return jsonify({'requests': [r.to_dict() for r in requests]})

@mentorship_bp.route('/mentor/requests', methods=['POST'])
@mentor_required
def offer_mentorship():
    """Mentor offers to mentor an approved startup"""
    data = get_json_body()
    mentorship_request = mentorship_service.create_request(
        g.caller, Initiator.MENTOR, g.caller.user_id, data.get('startupId'), data.get('message'))
    return jsonify({'message': 'Mentorship request sent successfully',
                    'request': mentorship_request.to_dict()}), 201

@mentorship_bp.route('/startup/request-mentor', methods=['POST'])
@login_required
def request_mentor():
    """Startup owner asks a mentor for mentorship"""
    data = get_json_body()
    mentorship_request = mentorship_service.create_request(
        g.caller, Initiator.STARTUP, data.get('mentorId'), data.get('startupId'), data.get('message'))
    return jsonify({'message': 'Mentorship request sent successfully',
                    'request': mentorship_request.to_dict()}), 201

@mentorship_bp.route('/startup/mentor-requests')
@mentorship_bp.route('/user/mentorship-requests')
@login_required
def startup_requests():
    """Requests on the caller's startups, either direction"""
    requests = mentorship_service.requests_for_owner(g.caller)
    return jsonify({'requests': [r.to_dict() for r in requests]})

@mentorship_bp.route('/mentor/requests/<int:request_id>/accept', methods=['POST'])
@login_required
def accept_request(request_id):
    mentorship_request, relationship = mentorship_service.accept_request(
        g.caller, request_id, get_json_body().get('response'))
    return jsonify({
        'message': 'Mentorship request accepted',
        'request': mentorship_request.to_dict(),
        'relationship': relationship.to_dict()
    })

@mentorship_bp.route('/mentor/requests/<int:request_id>/decline', methods=['POST'])
@login_required
def decline_request(request_id):
    mentorship_request, _ = mentorship_service.decline_request(
        g.caller, request_id, get_json_body().get('response'))
    return jsonify({'message': 'Mentorship request declined', 'request': mentorship_request.to_dict()})

@mentorship_bp.route('/user/mentorships')
@login_required
def user_mentorships():
    """Active mentorships of the caller's startups"""
    items = mentorship_service.relationships_for_owner(g.caller)
    return jsonify({'relationships': [r.to_dict() for r in items]})
