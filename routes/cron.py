import hmac
from flask import Blueprint, jsonify, request, current_app
from services.calls import send_due_reminders

cron_bp = Blueprint('cron', __name__, url_prefix='/api/cron')

@cron_bp.route('/send-reminders')
def send_reminders():
    """Reminder sweep, meant to be hit every 15 minutes by an external scheduler"""
    expected = current_app.config.get('CRON_SECRET')
    if expected and not hmac.compare_digest(request.args.get('secret', ''), expected):
        return jsonify({'error': 'Unauthorized'}), 401

    calls_processed, emails_sent = send_due_reminders()
    return jsonify({
        'message': f'Processed {calls_processed} calls, sent {emails_sent} reminder emails',
        'callsProcessed': calls_processed,
        'emailsSent': emails_sent
    })
