#!/usr/bin/env python3
"""
StartHub - Incubator Marketplace
A Flask application connecting startups with mentors, mentorship sessions and funding.
"""

import os
import click
from dotenv import load_dotenv
from flask import Flask
from flask_migrate import Migrate
from werkzeug.security import generate_password_hash

# Import our modules
from models import db, User, Role
from utils.notifications import mail
from utils.banner import print_startup_banner
from services.calls import send_due_reminders
from routes import register_blueprints

# Load environment variables from .env file
load_dotenv()

def create_app(test_config=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///starthub.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # Mail (simulation mode when MAIL_SERVER is unset)
    app.config['MAIL_SERVER'] = os.environ.get('MAIL_SERVER')
    app.config['MAIL_PORT'] = int(os.environ.get('MAIL_PORT', '587'))
    app.config['MAIL_USE_TLS'] = os.environ.get('MAIL_USE_TLS', 'true').lower() == 'true'
    app.config['MAIL_USERNAME'] = os.environ.get('MAIL_USERNAME')
    app.config['MAIL_PASSWORD'] = os.environ.get('MAIL_PASSWORD')
    app.config['MAIL_DEFAULT_SENDER'] = os.environ.get('MAIL_DEFAULT_SENDER', 'StartHub <noreply@starthub.local>')

    app.config['BASE_URL'] = os.environ.get('BASE_URL', 'http://localhost:5000')
    app.config['MEETING_URL_BASE'] = os.environ.get('MEETING_URL_BASE', 'https://meet.jit.si/StartHub-Session')
    app.config['CRON_SECRET'] = os.environ.get('CRON_SECRET')
    app.config['ADMIN_SESSION_MAX_AGE'] = int(os.environ.get('ADMIN_SESSION_MAX_AGE', '86400'))

    if test_config:
        app.config.update(test_config)

    # Handle PostgreSQL URL format for SQLAlchemy 2.0+
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = (
            app.config['SQLALCHEMY_DATABASE_URI'].replace('postgres://', 'postgresql://', 1)
        )

    if not app.config.get('TESTING'):
        print_startup_banner(app)

    # Initialize extensions
    db.init_app(app)
    mail.init_app(app)
    Migrate(app, db)

    # Register blueprints
    register_blueprints(app)
    register_commands(app)

    # Database migrations are handled by Flask-Migrate
    # Run: flask db upgrade (in production)

    return app

def register_commands(app):
    """CLI commands: flask create-admin, flask send-reminders"""

    @app.cli.command('create-admin')
    @click.option('--email', prompt=True, help='Admin email address')
    @click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
    @click.option('--name', default='Administrator', show_default=True)
    def create_admin(email, password, name):
        """Create an admin account, or promote an existing user to admin"""
        email = email.strip().lower()
        user = User.query.filter_by(email=email).first()
        if user is None:
            user = User(name=name, email=email, password_hash=generate_password_hash(password))
            db.session.add(user)
        else:
            user.password_hash = generate_password_hash(password)
        user.role = Role.ADMIN
        user.is_disabled = False
        db.session.commit()
        click.echo(f"Admin account ready: {user.email}")

    @app.cli.command('send-reminders')
    def send_reminders():
        """Run one reminder sweep for calls starting in 30 to 60 minutes"""
        calls_processed, emails_sent = send_due_reminders()
        click.echo(f"Processed {calls_processed} calls, sent {emails_sent} reminder emails")

# Create the application
app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
