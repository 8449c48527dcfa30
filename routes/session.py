from flask import Blueprint, jsonify, g
from services import login_required
from services import calls as call_service
from services import sessions as session_service
from services import mentorship as mentorship_service
from utils import get_json_body

session_bp = Blueprint('session', __name__, url_prefix='/api/session/<int:relationship_id>')

@session_bp.route('/messages')
@login_required
def list_messages(relationship_id):
    messages = session_service.list_messages(g.caller, relationship_id)
    return jsonify({'messages': [m.to_dict() for m in messages]})

@session_bp.route('/messages', methods=['POST'])
@login_required
def post_message(relationship_id):
    message = session_service.post_message(g.caller, relationship_id, get_json_body().get('content'))
    return jsonify({'message': message.to_dict()}), 201

@session_bp.route('/notes')
@login_required
def list_notes(relationship_id):
    notes = session_service.list_notes(g.caller, relationship_id)
    return jsonify({'notes': [n.to_dict() for n in notes]})

@session_bp.route('/notes', methods=['POST'])
@login_required
def create_note(relationship_id):
    data = get_json_body()
    note = session_service.create_note(g.caller, relationship_id, data.get('title'), data.get('content'))
    return jsonify({'note': note.to_dict()}), 201

@session_bp.route('/notes', methods=['PUT'])
@login_required
def update_note(relationship_id):
    data = get_json_body()
    note = session_service.update_note(g.caller, relationship_id, data.get('noteId'),
                                       data.get('title'), data.get('content'))
    return jsonify({'note': note.to_dict()})

@session_bp.route('/scheduled-calls')
@login_required
def list_calls(relationship_id):
    calls = call_service.list_calls(g.caller, relationship_id)
    return jsonify({'scheduledCalls': [c.to_dict() for c in calls]})

@session_bp.route('/scheduled-calls', methods=['POST'])
@login_required
def propose_call(relationship_id):
    data = get_json_body()
    call = call_service.propose_call(
        g.caller, relationship_id,
        scheduled_at=data.get('scheduledAt'),
        duration=data.get('duration'),
        title=data.get('title'),
        description=data.get('description')
    )
    return jsonify({'scheduledCall': call.to_dict()}), 201

@session_bp.route('/scheduled-calls/<int:call_id>/confirm', methods=['POST'])
@login_required
def confirm_call(relationship_id, call_id):
    call = call_service.confirm_call(g.caller, relationship_id, call_id)
    return jsonify({'message': 'Call confirmed successfully', 'scheduledCall': call.to_dict()})

@session_bp.route('/scheduled-calls/<int:call_id>/decline', methods=['POST'])
@login_required
def decline_call(relationship_id, call_id):
    call = call_service.decline_call(g.caller, relationship_id, call_id)
    return jsonify({'message': 'Call declined', 'scheduledCall': call.to_dict()})

@session_bp.route('/end', methods=['POST'])
@login_required
def end_relationship(relationship_id):
    relationship = mentorship_service.end_relationship(g.caller, relationship_id)
    return jsonify({'message': 'Mentorship ended', 'relationship': relationship.to_dict()})
