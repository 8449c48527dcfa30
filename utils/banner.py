"""
Startup summary of the settings that change how StartHub behaves.
"""
import os
from sqlalchemy.engine import make_url

BANNER = r"""
     _             _   _           _
 ___| |_ __ _ _ __| |_| |__  _   _| |__
/ __| __/ _` | '__| __| '_ \| | | | '_ \
\__ \ || (_| | |  | |_| | | | |_| | |_) |
|___/\__\__,_|_|   \__|_| |_|\__,_|_.__/
"""


def describe_database(uri):
    """Backend and database name, never the credentials"""
    url = make_url(uri)
    return f"{url.get_backend_name()} ({url.database or 'in-memory'})"


def describe_mail(config):
    if not config.get('MAIL_SERVER'):
        return 'simulation (MAIL_SERVER unset)'
    tls = ', TLS' if config.get('MAIL_USE_TLS') else ''
    return f"SMTP {config['MAIL_SERVER']}:{config.get('MAIL_PORT')}{tls}"


def startup_summary(app):
    """(label, value) rows shown under the banner"""
    config = app.config
    max_age_hours = config['ADMIN_SESSION_MAX_AGE'] / 3600
    return [
        ('Database', describe_database(config['SQLALCHEMY_DATABASE_URI'])),
        ('Mail', describe_mail(config)),
        ('Reminder cron', 'secret required' if config.get('CRON_SECRET') else 'open (CRON_SECRET unset)'),
        ('Admin session', f"{max_age_hours:g}h"),
        ('Meetings', config['MEETING_URL_BASE']),
        ('Build', os.environ.get('GIT_HASH', 'dev')[:8]),
    ]


def print_startup_banner(app):
    print("\033[96m" + BANNER + "\033[0m")
    print("\033[94m" + "=" * 70 + "\033[0m")
    for label, value in startup_summary(app):
        print(f"   {label + ':':<15}{value}")
    if uses_default_secret(app):
        print("\033[93m   SECRET_KEY is the development default; set it before deploying\033[0m")
    print("\033[94m" + "=" * 70 + "\033[0m")
    print()


def uses_default_secret(app):
    return app.config['SECRET_KEY'] == 'dev-secret-key-change-in-production'
