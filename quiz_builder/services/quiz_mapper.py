from datetime import datetime, timezone

from quiz_builder.models.quiz_db.question_db import Question, QuestionType
from quiz_builder.models.quiz_db.quiz_db import Quiz
from quiz_builder.schemas.quiz.quiz_out import (
    BooleanQuestionOut,
    CheckboxQuestionOut,
    InputQuestionOut,
    OptionOut,
    QuestionOut,
    QuizDetailOut,
    QuizSummaryOut,
)


def to_iso(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. ``2025-01-01T10:00:00.000Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_question_out(question: Question) -> QuestionOut:
    question_type = QuestionType(question.type)
    common = {"id": question.id, "text": question.text, "order": question.order}

    if question_type is QuestionType.BOOLEAN:
        return BooleanQuestionOut(type="BOOLEAN", boolean_answer=question.boolean_answer, **common)
    if question_type is QuestionType.INPUT:
        return InputQuestionOut(type="INPUT", input_answer=question.input_answer, **common)
    return CheckboxQuestionOut(
        type="CHECKBOX",
        options=[
            OptionOut(id=option.id, text=option.text, is_correct=option.is_correct)
            for option in question.options
        ],
        **common,
    )


def to_quiz_detail(quiz: Quiz) -> QuizDetailOut:
    return QuizDetailOut(
        id=quiz.id,
        title=quiz.title,
        created_at=to_iso(quiz.created_at),
        updated_at=to_iso(quiz.updated_at),
        questions=[to_question_out(question) for question in quiz.questions],
    )


def to_quiz_summary(quiz: Quiz, question_count: int) -> QuizSummaryOut:
    return QuizSummaryOut(
        id=quiz.id,
        title=quiz.title,
        question_count=question_count,
        created_at=to_iso(quiz.created_at),
    )
