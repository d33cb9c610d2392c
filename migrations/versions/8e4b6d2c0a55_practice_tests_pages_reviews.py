"""practice tests, pages and course reviews

Revision ID: 8e4b6d2c0a55
Revises: 3c1f2a7d9b10
Create Date: 2026-10-19 15:40:21.508913

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = '8e4b6d2c0a55'
down_revision: Union[str, None] = '3c1f2a7d9b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

test_type_enum = sa.Enum(
    'IELTS', 'TOEFL', 'PTE', 'GRE', 'GMAT', 'SAT', 'ACT', 'DUOLINGO', 'CAEL', 'CELPIP', 'CUSTOM',
    name='practicetesttypeenum'
)
difficulty_enum = sa.Enum('EASY', 'MEDIUM', 'HARD', 'EXPERT', name='difficultylevelenum')
question_type_enum = sa.Enum(
    'MULTIPLE_CHOICE', 'TRUE_FALSE', 'FILL_BLANK', 'ESSAY', 'SPEAKING', name='questiontypeenum'
)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.add_column('courses', sa.Column('rating', sa.Float(), server_default='0', nullable=False))
    op.add_column('courses', sa.Column('total_ratings', sa.Integer(), server_default='0', nullable=False))

    op.create_table(
        'course_reviews',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('course_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('review_text', sa.Text(), nullable=True),
        sa.Column('is_published', sa.Boolean(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'course_id', name='uq_course_review_user_course')
    )
    op.create_index(op.f('ix_course_reviews_id'), 'course_reviews', ['id'], unique=False)
    op.create_index(op.f('ix_course_reviews_course_id'), 'course_reviews', ['course_id'], unique=False)
    op.create_index(op.f('ix_course_reviews_user_id'), 'course_reviews', ['user_id'], unique=False)

    op.create_table(
        'pages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('excerpt', sa.String(), nullable=True),
        sa.Column('template', sa.String(), nullable=False),
        sa.Column('meta_title', sa.String(), nullable=True),
        sa.Column('meta_description', sa.String(), nullable=True),
        sa.Column('is_published', sa.Boolean(), nullable=True),
        sa.Column('published_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('order_index', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_pages_id'), 'pages', ['id'], unique=False)
    op.create_index(op.f('ix_pages_slug'), 'pages', ['slug'], unique=True)

    op.create_table(
        'practice_tests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('test_type', test_type_enum, nullable=False),
        sa.Column('difficulty_level', difficulty_enum, nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('total_questions', sa.Integer(), nullable=False),
        sa.Column('passing_score', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('is_free', sa.Boolean(), nullable=True),
        sa.Column('is_published', sa.Boolean(), nullable=True),
        sa.Column('instructions', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_practice_tests_id'), 'practice_tests', ['id'], unique=False)
    op.create_index(op.f('ix_practice_tests_title'), 'practice_tests', ['title'], unique=False)
    op.create_index(op.f('ix_practice_tests_slug'), 'practice_tests', ['slug'], unique=True)
    op.create_index(op.f('ix_practice_tests_test_type'), 'practice_tests', ['test_type'], unique=False)

    op.create_table(
        'practice_test_sections',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('test_id', sa.Integer(), nullable=False),
        sa.Column('section_name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('question_count', sa.Integer(), nullable=False),
        sa.Column('time_limit', sa.Integer(), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('instructions', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['test_id'], ['practice_tests.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_practice_test_sections_id'), 'practice_test_sections', ['id'], unique=False)
    op.create_index(op.f('ix_practice_test_sections_test_id'), 'practice_test_sections', ['test_id'], unique=False)

    op.create_table(
        'practice_questions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('section_id', sa.Integer(), nullable=False),
        sa.Column('question_text', sa.Text(), nullable=False),
        sa.Column('question_type', question_type_enum, nullable=False),
        sa.Column('options', sa.JSON(), nullable=True),
        sa.Column('correct_answer', sa.String(), nullable=True),
        sa.Column('explanation', sa.Text(), nullable=True),
        sa.Column('points', sa.Integer(), nullable=False),
        sa.Column('difficulty', difficulty_enum, nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['section_id'], ['practice_test_sections.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_practice_questions_id'), 'practice_questions', ['id'], unique=False)
    op.create_index(op.f('ix_practice_questions_section_id'), 'practice_questions', ['section_id'], unique=False)


def downgrade() -> None:
    for table in ('practice_questions', 'practice_test_sections', 'practice_tests', 'pages', 'course_reviews'):
        op.drop_table(table)

    bind = op.get_bind()
    for enum in (question_type_enum, difficulty_enum, test_type_enum):
        enum.drop(bind, checkfirst=True)

    op.drop_column('courses', 'total_ratings')
    op.drop_column('courses', 'rating')
