"""Initial StartHub schema

Revision ID: 3f9a2c1d7b40
Revises: 
Create Date: 2026-09-21 10:12:44.318205

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9a2c1d7b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(100), nullable=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('is_disabled', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email')
    )
    op.create_table('funding_opportunity',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('provider_name', sa.String(200), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('deadline', sa.DateTime(), nullable=False),
        sa.Column('requirements', sa.Text(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('mentor_profile',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        sa.Column('expertise', sa.Text(), nullable=False),
        sa.Column('experience', sa.Text(), nullable=False),
        sa.Column('company', sa.String(200), nullable=True),
        sa.Column('availability', sa.String(100), nullable=True),
        sa.Column('mentor_type', sa.String(100), nullable=True),
        sa.Column('languages', sa.String(200), nullable=True),
        sa.Column('linkedin', sa.String(255), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )
    op.create_table('mentor_application',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        sa.Column('expertise', sa.Text(), nullable=False),
        sa.Column('experience', sa.Text(), nullable=False),
        sa.Column('portfolio_url', sa.String(255), nullable=True),
        sa.Column('company', sa.String(200), nullable=True),
        sa.Column('availability', sa.String(100), nullable=True),
        sa.Column('mentor_type', sa.String(100), nullable=True),
        sa.Column('languages', sa.String(200), nullable=True),
        sa.Column('linkedin', sa.String(255), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('admin_notes', sa.Text(), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('uq_mentor_application_open', 'mentor_application', ['user_id'], unique=True,
                    sqlite_where=sa.text("status IN ('PENDING', 'APPROVED')"),
                    postgresql_where=sa.text("status IN ('PENDING', 'APPROVED')"))
    op.create_table('startup',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('innovator_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('stage', sa.String(50), nullable=True),
        sa.Column('project_type', sa.String(50), nullable=True),
        sa.Column('company_name', sa.String(200), nullable=True),
        sa.Column('university', sa.String(200), nullable=True),
        sa.Column('problem', sa.Text(), nullable=True),
        sa.Column('solution', sa.Text(), nullable=True),
        sa.Column('target_customers', sa.Text(), nullable=True),
        sa.Column('milestones', sa.Text(), nullable=True),
        sa.Column('team_members', sa.Text(), nullable=True),
        sa.Column('demo_video_url', sa.String(500), nullable=True),
        sa.Column('contact_email', sa.String(255), nullable=True),
        sa.Column('contact_linkedin', sa.String(255), nullable=True),
        sa.Column('contact_website', sa.String(255), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['innovator_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('mentorship_request',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('mentor_id', sa.Integer(), nullable=False),
        sa.Column('startup_id', sa.Integer(), nullable=False),
        sa.Column('initiated_by', sa.String(20), nullable=False),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('response', sa.Text(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('decided_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['mentor_id'], ['user.id']),
        sa.ForeignKeyConstraint(['startup_id'], ['startup.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('mentor_id', 'startup_id', name='uq_mentorship_request_pair')
    )
    op.create_table('mentorship_relationship',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('mentor_id', sa.Integer(), nullable=False),
        sa.Column('startup_id', sa.Integer(), nullable=False),
        sa.Column('request_id', sa.Integer(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('ended_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['mentor_id'], ['user.id']),
        sa.ForeignKeyConstraint(['request_id'], ['mentorship_request.id']),
        sa.ForeignKeyConstraint(['startup_id'], ['startup.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('uq_active_relationship_pair', 'mentorship_relationship',
                    ['mentor_id', 'startup_id'], unique=True,
                    sqlite_where=sa.text("status = 'ACTIVE'"),
                    postgresql_where=sa.text("status = 'ACTIVE'"))
    op.create_table('scheduled_call',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('relationship_id', sa.Integer(), nullable=False),
        sa.Column('proposed_by_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(200), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('scheduled_at', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('meeting_url', sa.String(500), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('reminder_sent', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['proposed_by_id'], ['user.id']),
        sa.ForeignKeyConstraint(['relationship_id'], ['mentorship_relationship.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('session_message',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('relationship_id', sa.Integer(), nullable=False),
        sa.Column('sender_id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['relationship_id'], ['mentorship_relationship.id']),
        sa.ForeignKeyConstraint(['sender_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('session_note',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('relationship_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['author_id'], ['user.id']),
        sa.ForeignKeyConstraint(['relationship_id'], ['mentorship_relationship.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('funding_application',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('opportunity_id', sa.Integer(), nullable=False),
        sa.Column('innovator_id', sa.Integer(), nullable=False),
        sa.Column('startup_id', sa.Integer(), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('full_name', sa.String(200), nullable=True),
        sa.Column('phone_number', sa.String(50), nullable=True),
        sa.Column('country', sa.String(100), nullable=True),
        sa.Column('has_registered_company', sa.Boolean(), nullable=True),
        sa.Column('company_name', sa.String(200), nullable=True),
        sa.Column('company_website', sa.String(255), nullable=True),
        sa.Column('company_description', sa.Text(), nullable=True),
        sa.Column('company_stage', sa.String(50), nullable=True),
        sa.Column('focus_area', sa.Text(), nullable=True),
        sa.Column('industry_focus', sa.Text(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['innovator_id'], ['user.id']),
        sa.ForeignKeyConstraint(['opportunity_id'], ['funding_opportunity.id']),
        sa.ForeignKeyConstraint(['startup_id'], ['startup.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('uq_pending_funding_application', 'funding_application',
                    ['opportunity_id', 'innovator_id'], unique=True,
                    sqlite_where=sa.text("status = 'PENDING'"),
                    postgresql_where=sa.text("status = 'PENDING'"))


def downgrade():
    op.drop_index('uq_pending_funding_application', table_name='funding_application')
    op.drop_table('funding_application')
    op.drop_table('session_note')
    op.drop_table('session_message')
    op.drop_table('scheduled_call')
    op.drop_index('uq_active_relationship_pair', table_name='mentorship_relationship')
    op.drop_table('mentorship_relationship')
    op.drop_table('mentorship_request')
    op.drop_table('startup')
    op.drop_index('uq_mentor_application_open', table_name='mentor_application')
    op.drop_table('mentor_application')
    op.drop_table('mentor_profile')
    op.drop_table('funding_opportunity')
    op.drop_table('user')
