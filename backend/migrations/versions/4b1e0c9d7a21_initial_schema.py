"""initial schema: users, exercise catalog, workouts

Revision ID: 4b1e0c9d7a21
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = '4b1e0c9d7a21'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=254), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )
    op.create_table(
        'muscle_groups',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(name) > 0', name=op.f('ck_muscle_groups_name_not_empty')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_muscle_groups')),
        sa.UniqueConstraint('name', name='uq_muscle_groups_name'),
    )
    op.create_table(
        'exercise_templates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(name) > 0', name=op.f('ck_exercise_templates_name_not_empty')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_exercise_templates')),
        sa.UniqueConstraint('name', name='uq_exercise_templates_name'),
    )
    op.create_table(
        'exercise_template_muscle_groups',
        sa.Column('exercise_template_id', sa.Integer(), nullable=False),
        sa.Column('muscle_group_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['exercise_template_id'], ['exercise_templates.id'], name=op.f('fk_exercise_template_muscle_groups_exercise_template_id_exercise_templates'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['muscle_group_id'], ['muscle_groups.id'], name=op.f('fk_exercise_template_muscle_groups_muscle_group_id_muscle_groups'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('exercise_template_id', 'muscle_group_id', name=op.f('pk_exercise_template_muscle_groups')),
    )
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(name) > 0', name=op.f('ck_workouts_name_not_empty')),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], name=op.f('fk_workouts_owner_id_users'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_workouts')),
    )
    op.create_index('ix_workouts_owner_created', 'workouts', ['owner_id', 'created_at'], unique=False)
    op.create_table(
        'logged_exercises',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('workout_id', sa.Integer(), nullable=False),
        sa.Column('exercise_template_id', sa.Integer(), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Numeric(precision=7, scale=2), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('sets > 0', name=op.f('ck_logged_exercises_sets_positive')),
        sa.CheckConstraint('reps > 0', name=op.f('ck_logged_exercises_reps_positive')),
        sa.CheckConstraint('weight IS NULL OR weight >= 0', name=op.f('ck_logged_exercises_weight_non_negative')),
        sa.ForeignKeyConstraint(['exercise_template_id'], ['exercise_templates.id'], name=op.f('fk_logged_exercises_exercise_template_id_exercise_templates'), ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['workout_id'], ['workouts.id'], name=op.f('fk_logged_exercises_workout_id_workouts'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_logged_exercises')),
    )
    op.create_index('ix_logged_exercises_workout', 'logged_exercises', ['workout_id'], unique=False)
    op.create_index('ix_logged_exercises_template', 'logged_exercises', ['exercise_template_id'], unique=False)


def downgrade():
    op.drop_index('ix_logged_exercises_template', table_name='logged_exercises')
    op.drop_index('ix_logged_exercises_workout', table_name='logged_exercises')
    op.drop_table('logged_exercises')
    op.drop_index('ix_workouts_owner_created', table_name='workouts')
    op.drop_table('workouts')
    op.drop_table('exercise_template_muscle_groups')
    op.drop_table('exercise_templates')
    op.drop_table('muscle_groups')
    op.drop_table('users')
