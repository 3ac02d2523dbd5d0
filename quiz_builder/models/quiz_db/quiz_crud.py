import logging
from contextlib import contextmanager
from typing import Iterator, List, NamedTuple, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from quiz_builder.core.exceptions import StorageError
from quiz_builder.models.quiz_db.option_db import Option
from quiz_builder.models.quiz_db.question_db import Question, QuestionType
from quiz_builder.models.quiz_db.quiz_db import Quiz
from quiz_builder.schemas.quiz.quiz_base import (
    BooleanQuestionIn,
    InputQuestionIn,
    QuestionIn,
    QuizCreate,
)

logger = logging.getLogger(__name__)


class QuizSummaryRow(NamedTuple):
    quiz: Quiz
    question_count: int


@contextmanager
def storage_errors(db: Session, action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Storage failure while trying to %s: %s", action, exc)
        raise StorageError() from exc


def build_question(question_in: QuestionIn, position: int) -> Question:
    question = Question(
        text=question_in.text,
        type=QuestionType(question_in.type),
        order=question_in.order if question_in.order is not None else position,
    )
    if isinstance(question_in, BooleanQuestionIn):
        question.boolean_answer = question_in.boolean_answer
    elif isinstance(question_in, InputQuestionIn):
        question.input_answer = question_in.input_answer
    else:
        question.options = [
            Option(text=option.text, is_correct=option.is_correct)
            for option in question_in.options
        ]
    return question


def create_quiz(db: Session, quiz_in: QuizCreate) -> Quiz:
    """Insert the quiz, its questions and their options in one transaction."""
    quiz = Quiz(
        title=quiz_in.title,
        questions=[build_question(question_in, position) for position, question_in in enumerate(quiz_in.questions)],
    )
    with storage_errors(db, "create a quiz"):
        db.add(quiz)
        db.commit()
        return get_quiz_by_id(db, quiz.id)


def list_quizzes(db: Session) -> List[QuizSummaryRow]:
    with storage_errors(db, "list quizzes"):
        rows = (
            db.query(Quiz, func.count(Question.id))
            .outerjoin(Question, Question.quiz_id == Quiz.id)
            .group_by(Quiz.id)
            .order_by(Quiz.created_at.desc(), Quiz.id.desc())
            .all()
        )
    return [QuizSummaryRow(quiz=quiz, question_count=count) for quiz, count in rows]


def get_quiz_by_id(db: Session, quiz_id: int) -> Optional[Quiz]:
    with storage_errors(db, "load a quiz"):
        return (
            db.query(Quiz)
            .options(selectinload(Quiz.questions).selectinload(Question.options))
            .filter(Quiz.id == quiz_id)
            .first()
        )


def delete_quiz(db: Session, quiz_id: int) -> bool:
    """Delete a quiz with everything it owns. Returns False if no quiz matched."""
    with storage_errors(db, "delete a quiz"):
        quiz = db.query(Quiz).filter(Quiz.id == quiz_id).first()
        if not quiz:
            return False
        db.delete(quiz)
        db.commit()
    return True
