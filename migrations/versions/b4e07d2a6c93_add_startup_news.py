"""Add startup news updates

Revision ID: b4e07d2a6c93
Revises: 7c21e8a94f15
Create Date: 2026-10-19 09:41:27.104836

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'b4e07d2a6c93'
down_revision = '7c21e8a94f15'
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    inspector = sa.inspect(conn)

    if 'startup_news' not in inspector.get_table_names():
        op.create_table('startup_news',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('startup_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(200), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
            sa.ForeignKeyConstraint(['startup_id'], ['startup.id']),
            sa.PrimaryKeyConstraint('id')
        )


def downgrade():
    op.drop_table('startup_news')
