from flask import Blueprint, jsonify, request, g
from services import login_required, admin_required
from services.auth import has_admin_session
from services import funding as funding_service
from utils import get_json_body, parse_int

funding_bp = Blueprint('funding', __name__, url_prefix='/api')

@funding_bp.route('/funding-opportunities')
def list_opportunities():
    opportunities = funding_service.list_opportunities(
        opportunity_id=parse_int(request.args.get('id'), 'id'),
        status=request.args.get('status')
    )
    return jsonify({'opportunities': [o.to_dict(include_count=True) for o in opportunities]})

@funding_bp.route('/funding-opportunities', methods=['POST'])
@admin_required
def create_opportunity():
    opportunity = funding_service.create_opportunity(get_json_body())
    return jsonify({'opportunity': opportunity.to_dict()}), 201

@funding_bp.route('/funding-opportunities', methods=['PATCH'])
@admin_required
def update_opportunity():
    data = get_json_body()
    opportunity_id = parse_int(data.get('id'), 'id')
    if opportunity_id is None:
        return jsonify({'error': 'Missing required field: id'}), 400
    opportunity = funding_service.update_opportunity(opportunity_id, data)
    return jsonify({'opportunity': opportunity.to_dict()})

@funding_bp.route('/funding-opportunities', methods=['DELETE'])
@admin_required
def delete_opportunity():
    opportunity_id = parse_int(request.args.get('id'), 'id')
    if opportunity_id is None:
        return jsonify({'error': 'Missing required parameter: id'}), 400
    funding_service.delete_opportunity(opportunity_id)
    return jsonify({'message': 'Funding opportunity deleted successfully'})

@funding_bp.route('/funding-applications')
@login_required
def list_applications():
    applications = funding_service.list_applications(
        g.caller,
        is_admin=has_admin_session(g.caller),
        opportunity_id=parse_int(request.args.get('opportunityId'), 'opportunityId'),
        innovator_id=parse_int(request.args.get('innovatorId'), 'innovatorId'),
        startup_id=parse_int(request.args.get('startupId'), 'startupId'),
        status=request.args.get('status')
    )
    return jsonify({'applications': [a.to_dict() for a in applications]})

@funding_bp.route('/funding-applications', methods=['POST'])
@login_required
def submit_application():
    data = get_json_body()
    application = funding_service.submit_application(
        g.caller, parse_int(data.get('opportunityId'), 'opportunityId'), data)
    return jsonify({'application': application.to_dict()}), 201

@funding_bp.route('/funding-applications', methods=['PATCH'])
@admin_required
def decide_application():
    """Admin status overwrite"""
    data = get_json_body()
    application = funding_service.decide_application(parse_int(data.get('id'), 'id'), data.get('status'))
    return jsonify({'application': application.to_dict()})
