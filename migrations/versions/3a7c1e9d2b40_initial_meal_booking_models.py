"""initial meal booking models

Revision ID: 3a7c1e9d2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c1e9d2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=100), nullable=True),
            sa.Column('email', sa.String(length=120), nullable=False, unique=True),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('role', sa.Enum('USER', 'ADMIN', name='userrole', native_enum=False, length=20),
                      nullable=False, server_default='USER'),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    if not insp.has_table('meals'):
        op.create_table(
            'meals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('title', sa.String(length=150), nullable=False),
            sa.Column('type', sa.Enum('BREAKFAST', 'LUNCH', 'DINNER', name='mealtype', native_enum=False, length=20),
                      nullable=False),
            sa.Column('date', sa.DateTime(), nullable=False),
            sa.Column('img_url', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_meals_date', 'meals', ['date'])

    if not insp.has_table('ingredient_requirements'):
        op.create_table(
            'ingredient_requirements',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('meal_id', sa.Integer(), sa.ForeignKey('meals.id', ondelete='CASCADE'), nullable=False),
            sa.Column('item_name', sa.String(length=150), nullable=False),
            sa.Column('grams_per_pax', sa.Float(), nullable=False),
        )
        op.create_index('ix_ingredient_requirements_meal_id', 'ingredient_requirements', ['meal_id'])

    if not insp.has_table('attendance'):
        op.create_table(
            'attendance',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('meal_id', sa.Integer(), sa.ForeignKey('meals.id', ondelete='CASCADE'), nullable=False),
            sa.Column('has_eaten', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.UniqueConstraint('user_id', 'meal_id', name='uq_attendance_user_meal'),
        )
        op.create_index('ix_attendance_meal_id', 'attendance', ['meal_id'])
        op.create_index('ix_attendance_created_at', 'attendance', ['created_at'])

    if not insp.has_table('feedback'):
        op.create_table(
            'feedback',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('meal_id', sa.Integer(), sa.ForeignKey('meals.id', ondelete='CASCADE'), nullable=False),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('rating', sa.Integer(), nullable=False),
            sa.Column('comment', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        )
        op.create_index('ix_feedback_meal_id', 'feedback', ['meal_id'])


def downgrade():
    op.drop_table('feedback')
    op.drop_table('attendance')
    op.drop_table('ingredient_requirements')
    op.drop_table('meals')
    op.drop_table('users')
