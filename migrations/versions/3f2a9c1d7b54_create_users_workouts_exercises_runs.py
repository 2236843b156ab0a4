"""create users, workouts, exercises and runs

Revision ID: 3f2a9c1d7b54
Revises:
Create Date: 2024-01-08 10:12:31.402118

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f2a9c1d7b54'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=80), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=150), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('target_distance', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('target_distance > 0', name='ck_users_target_distance_positive'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )

    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('duration IS NULL OR duration > 0', name='ck_workouts_duration_positive'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('workouts', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_workouts_user_id'), ['user_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_workouts_date'), ['date'], unique=False)
        batch_op.create_index('idx_workouts_user_date', ['user_id', 'date'], unique=False)

    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('workout_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['workout_id'], ['workouts.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('exercises', schema=None) as batch_op:
        batch_op.create_index('idx_exercises_workout_id', ['workout_id'], unique=False)

    op.create_table(
        'runs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('distance', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('distance > 0', name='ck_runs_distance_positive'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('runs', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_runs_user_id'), ['user_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_runs_date'), ['date'], unique=False)
        batch_op.create_index('idx_runs_user_date', ['user_id', 'date'], unique=False)


def downgrade():
    with op.batch_alter_table('runs', schema=None) as batch_op:
        batch_op.drop_index('idx_runs_user_date')
        batch_op.drop_index(batch_op.f('ix_runs_date'))
        batch_op.drop_index(batch_op.f('ix_runs_user_id'))
    op.drop_table('runs')

    with op.batch_alter_table('exercises', schema=None) as batch_op:
        batch_op.drop_index('idx_exercises_workout_id')
    op.drop_table('exercises')

    with op.batch_alter_table('workouts', schema=None) as batch_op:
        batch_op.drop_index('idx_workouts_user_date')
        batch_op.drop_index(batch_op.f('ix_workouts_date'))
        batch_op.drop_index(batch_op.f('ix_workouts_user_id'))
    op.drop_table('workouts')

    op.drop_table('users')
