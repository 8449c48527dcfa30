"""Normalize legacy role and status values

Revision ID: 7c21e8a94f15
Revises: 3f9a2c1d7b40
Create Date: 2026-09-28 14:03:10.552917

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '7c21e8a94f15'
down_revision = '3f9a2c1d7b40'
branch_labels = None
depends_on = None

# Tables whose status column must hold upper-case values
STATUS_TABLES = ('startup', 'mentor_application', 'mentorship_request',
                 'mentorship_relationship', 'scheduled_call', 'funding_opportunity',
                 'funding_application')


def upgrade():
    conn = op.get_bind()
    inspector = sa.inspect(conn)
    tables = inspector.get_table_names()

    # Imported data may carry lower-case roles such as 'mentor'
    if 'user' in tables:
        op.execute('UPDATE "user" SET role = UPPER(role) WHERE role != UPPER(role)')

    for table in STATUS_TABLES:
        if table in tables:
            op.execute(f"UPDATE {table} SET status = UPPER(status) WHERE status != UPPER(status)")

    # Requests were once marked ACCEPTED instead of APPROVED
    if 'mentorship_request' in tables:
        op.execute("UPDATE mentorship_request SET status = 'APPROVED' WHERE status = 'ACCEPTED'")
        op.execute("UPDATE mentorship_request SET initiated_by = UPPER(initiated_by) "
                   "WHERE initiated_by != UPPER(initiated_by)")


def downgrade():
    # Normalized values cannot be told apart from ones that were already canonical
    pass
