"""Create TPO portal tables"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3a7c5e91d2f4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('role', sa.String(20), nullable=False, server_default='tpo'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    # Create students table
    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('roll_number', sa.String(50), nullable=False),
        sa.Column('branch', sa.String(50), nullable=True),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.Column('batch', sa.String(20), nullable=True),
        sa.Column('email', sa.Text(), nullable=True),
        sa.Column('phone', sa.String(30), nullable=True),
        sa.Column('photo_url', sa.Text(), nullable=True),
        sa.Column('selected', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('company_name', sa.Text(), nullable=True),
        sa.Column('offer_letter_url', sa.Text(), nullable=True),
        sa.Column('package', sa.Integer(), nullable=True),
        sa.Column('role', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_students_roll_number'), 'students', ['roll_number'], unique=True)
    op.create_index(op.f('ix_students_branch'), 'students', ['branch'])

    # Create events table
    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('company', sa.Text(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('attachment_url', sa.Text(), nullable=True),
        sa.Column('notification_link', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_events_company'), 'events', ['company'])

    # Create alumni table
    op.create_table(
        'alumni',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('roll_number', sa.String(50), nullable=False),
        sa.Column('pass_out_year', sa.Integer(), nullable=False),
        sa.Column('higher_education_college', sa.Text(), nullable=True),
        sa.Column('college_roll_number', sa.String(50), nullable=True),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('contact_number', sa.String(30), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_alumni_pass_out_year'), 'alumni', ['pass_out_year'])

    # Create attendance table
    op.create_table(
        'attendance',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=True),
        sa.Column('student_name', sa.Text(), nullable=False),
        sa.Column('roll_number', sa.String(50), nullable=False),
        sa.Column('branch', sa.String(50), nullable=True),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.Column('marked_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['event_id'], ['events.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_attendance_roll_number'), 'attendance', ['roll_number'])

    # Create notification tables
    op.create_table(
        'hero_notifications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('link', sa.Text(), nullable=True),
        sa.Column('icon', sa.String(50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'important_notifications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('link', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    # Create news table
    op.create_table(
        'news',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade():
    op.drop_table('news')
    op.drop_table('important_notifications')
    op.drop_table('hero_notifications')
    op.drop_index(op.f('ix_attendance_roll_number'), table_name='attendance')
    op.drop_table('attendance')
    op.drop_index(op.f('ix_alumni_pass_out_year'), table_name='alumni')
    op.drop_table('alumni')
    op.drop_index(op.f('ix_events_company'), table_name='events')
    op.drop_table('events')
    op.drop_index(op.f('ix_students_branch'), table_name='students')
    op.drop_index(op.f('ix_students_roll_number'), table_name='students')
    op.drop_table('students')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_table('users')
