"""create quiz tables

Revision ID: 3f2a9c1d7b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

question_type = sa.Enum("BOOLEAN", "INPUT", "CHECKBOX", name="question_type")


def upgrade() -> None:
    op.create_table(
        "quizzes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_quizzes_id", "quizzes", ["id"])
    op.create_index("ix_quizzes_created_at", "quizzes", ["created_at"])

    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("type", question_type, nullable=False),
        sa.Column("order", sa.Integer(), nullable=True),
        sa.Column("boolean_answer", sa.Boolean(), nullable=True),
        sa.Column("input_answer", sa.String(), nullable=True),
        sa.Column("quiz_id", sa.Integer(), sa.ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_questions_id", "questions", ["id"])
    op.create_index("ix_questions_quiz_id", "questions", ["quiz_id"])

    op.create_table(
        "options",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("text", sa.String(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("question_id", sa.Integer(), sa.ForeignKey("questions.id", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_options_id", "options", ["id"])
    op.create_index("ix_options_question_id", "options", ["question_id"])


def downgrade() -> None:
    op.drop_index("ix_options_question_id", table_name="options")
    op.drop_index("ix_options_id", table_name="options")
    op.drop_table("options")
    op.drop_index("ix_questions_quiz_id", table_name="questions")
    op.drop_index("ix_questions_id", table_name="questions")
    op.drop_table("questions")
    op.drop_index("ix_quizzes_created_at", table_name="quizzes")
    op.drop_index("ix_quizzes_id", table_name="quizzes")
    op.drop_table("quizzes")
    question_type.drop(op.get_bind(), checkfirst=True)
