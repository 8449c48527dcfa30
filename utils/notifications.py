"""
Email notification utilities for mentorship calls
"""
from email.utils import formataddr
from flask import current_app, render_template
from flask_mail import Mail, Message

mail = Mail()


def format_call_time(value):
    """Human readable call time, always stored and shown in UTC"""
    return value.strftime('%A, %B %d, %Y at %H:%M UTC')


def render_email_template(template_name, **context):
    """Render the plain text and HTML bodies of an email template"""
    body = render_template(f"email/{template_name}.txt", **context)
    html = render_template(f"email/{template_name}.html", **context)
    return body, html


def send_email(recipient, subject, template_name, **context):
    """
    Send a single templated email.

    Args:
        recipient: (name, email) tuple of the addressee
        subject: Subject line
        template_name: Name of the template pair under templates/email/

    Returns:
        bool: True when the message was handed to the mail server (or simulated)
    """
    name, email = recipient
    if not email:
        print(f"[NOTIFICATION] No email address for {name} - skipping '{subject}'")
        return False

    # Check if mail is configured
    if not current_app.config.get('MAIL_SERVER'):
        print(f"[EMAIL SIMULATION] To: {formataddr((name, email))}")
        print(f"[EMAIL SIMULATION] Subject: {subject}")
        print("-" * 50)
        return True

    body, html = render_email_template(template_name, recipient_name=name, **context)

    try:
        msg = Message(
            subject=subject,
            recipients=[formataddr((name, email))],
            sender=current_app.config.get('MAIL_DEFAULT_SENDER')
        )
        msg.body = body
        msg.html = html
        mail.send(msg)
        print(f"[NOTIFICATION] Sent '{subject}' to {email}")
        return True

    except Exception as e:
        print(f"[NOTIFICATION] Failed to send '{subject}' to {email}: {e}")
        return False


def _call_context(call, relationship):
    return {
        'title': call.title,
        'when': format_call_time(call.scheduled_at),
        'duration': call.duration,
        'meeting_url': call.meeting_url,
        'startup_title': relationship.startup.title,
        'base_url': current_app.config.get('BASE_URL', 'http://localhost:5000'),
    }


def _party(user, fallback):
    return (user.name or fallback, user.email)


def notify_call_scheduled(call, relationship, proposer, recipient):
    """Tell the non-proposing party that a call was proposed"""
    return send_email(
        _party(recipient, 'there'),
        f"New Call Scheduled - {relationship.startup.title}",
        'call_scheduled',
        proposer_name=proposer.name or 'User',
        **_call_context(call, relationship)
    )


def notify_call_confirmed(call, relationship, proposer, confirmer):
    """Tell the proposer that the other party confirmed"""
    return send_email(
        _party(proposer, 'there'),
        f"Call Confirmed - {relationship.startup.title}",
        'call_confirmed',
        other_name=confirmer.name or 'User',
        **_call_context(call, relationship)
    )


def notify_call_declined(call, relationship, proposer, decliner):
    """Tell the proposer that the other party declined"""
    return send_email(
        _party(proposer, 'there'),
        f"Call Declined - {relationship.startup.title}",
        'call_declined',
        other_name=decliner.name or 'User',
        **_call_context(call, relationship)
    )


def send_call_reminder(call, relationship, recipient, other_party):
    """Remind one participant about an upcoming confirmed call"""
    return send_email(
        _party(recipient, 'there'),
        f"Reminder: Call in less than an hour - {relationship.startup.title}",
        'call_reminder',
        other_name=other_party.name or 'your counterpart',
        **_call_context(call, relationship)
    )
