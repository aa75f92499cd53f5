"""Add job applications table

Revision ID: 0001
Revises:
Create Date: 2025-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LIFECYCLE_DATES = [
    'application_sent_date',
    'first_response_date',
    'interview_scheduled_date',
    'interview_completed_date',
    'offer_received_date',
    'offer_deadline_date',
    'rejection_date',
    'withdrawal_date',
    'follow_up_date',
]


def upgrade() -> None:
    op.create_table(
        'job_applications',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('company_name', sa.String(length=255), nullable=False),
        sa.Column('position_title', sa.String(length=255), nullable=False),
        sa.Column('application_date', sa.Date(), nullable=False),
        sa.Column('application_status', sa.String(length=20), nullable=False, default='applied'),
        sa.Column('area_of_work', sa.String(length=255), nullable=True),
        sa.Column('job_location', sa.String(length=255), nullable=True),
        sa.Column('job_type', sa.String(length=20), nullable=True),
        sa.Column('work_arrangement', sa.String(length=20), nullable=True),
        sa.Column('application_method', sa.String(length=255), nullable=True),
        sa.Column('salary_range', sa.String(length=255), nullable=True),
        sa.Column('job_description', sa.Text(), nullable=True),
        sa.Column('contact_person', sa.String(length=255), nullable=True),
        sa.Column('contact_email', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('cv_file_url', sa.String(length=1024), nullable=True),
        sa.Column('cv_file_name', sa.String(length=255), nullable=True),
        sa.Column('cover_letter_url', sa.String(length=1024), nullable=True),
        sa.Column('cover_letter_name', sa.String(length=255), nullable=True),
        *[sa.Column(name, sa.Date(), nullable=True) for name in LIFECYCLE_DATES],
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_job_applications_user_id', 'job_applications', ['user_id'], unique=False)
    op.create_index('ix_job_applications_application_date', 'job_applications', ['application_date'], unique=False)
    op.create_index('ix_job_applications_created_at', 'job_applications', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_job_applications_created_at', table_name='job_applications')
    op.drop_index('ix_job_applications_application_date', table_name='job_applications')
    op.drop_index('ix_job_applications_user_id', table_name='job_applications')
    op.drop_table('job_applications')
