from flask import Blueprint, jsonify, request, session, g
from services import login_required
from services import startups as startup_service
from utils import get_json_body, parse_int

startups_bp = Blueprint('startups', __name__, url_prefix='/api')

@startups_bp.route('/startups')
def list_startups():
    """Public startup listing"""
    startups = startup_service.list_startups(
        status=request.args.get('status'),
        innovator_id=parse_int(request.args.get('innovatorId'), 'innovatorId'),
        include_archived=request.args.get('includeArchived') == 'true'
    )
    return jsonify({'startups': [s.to_dict() for s in startups]})

@startups_bp.route('/startups/<int:startup_id>')
def get_startup(startup_id):
    """Public detail; isInnovator tells the owner apart from other visitors"""
    startup = startup_service.get_startup(startup_id)
    is_innovator = session.get('user_id') == startup.innovator_id
    return jsonify({'startup': startup.to_dict(), 'isInnovator': is_innovator})

@startups_bp.route('/submit-startup', methods=['POST'])
@login_required
def submit_startup():
    """Submit a startup for admin approval"""
    startup = startup_service.submit_startup(g.caller, get_json_body())
    return jsonify({
        'message': 'Your startup has been submitted successfully and is pending approval.',
        'startup': startup.to_dict()
    }), 201

@startups_bp.route('/user/startups/<int:startup_id>/archive', methods=['POST'])
@login_required
def archive_startup(startup_id):
    """Archive the caller's own approved startup"""
    startup = startup_service.archive_startup(g.caller, startup_id)
    return jsonify({'message': 'Startup archived successfully', 'startup': startup.to_dict()})

@startups_bp.route('/startups/<int:startup_id>/news')
def list_news(startup_id):
    news = startup_service.list_news(startup_id)
    return jsonify({'news': [n.to_dict() for n in news]})

@startups_bp.route('/startups/<int:startup_id>/news', methods=['POST'])
@login_required
def create_news(startup_id):
    data = get_json_body()
    news = startup_service.create_news(g.caller, startup_id, data.get('title'), data.get('content'))
    return jsonify({'news': news.to_dict()}), 201

@startups_bp.route('/startups/<int:startup_id>/news/<int:news_id>', methods=['PUT'])
@login_required
def update_news(startup_id, news_id):
    data = get_json_body()
    news = startup_service.update_news(g.caller, startup_id, news_id,
                                       title=data.get('title'), content=data.get('content'))
    return jsonify({'news': news.to_dict()})

@startups_bp.route('/startups/<int:startup_id>/news/<int:news_id>', methods=['DELETE'])
@login_required
def delete_news(startup_id, news_id):
    startup_service.delete_news(g.caller, startup_id, news_id)
    return jsonify({'message': 'News item deleted'})
