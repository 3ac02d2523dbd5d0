import logging
import re
from typing import Any, List, Union

from sqlalchemy.orm import Session

from quiz_builder.core.exceptions import MalformedIdentifierError, QuizNotFoundError
from quiz_builder.models.quiz_db import quiz_crud
from quiz_builder.schemas.quiz.quiz_out import QuizDetailOut, QuizSummaryOut
from quiz_builder.schemas.quiz.quiz_validation import validate_quiz_payload
from quiz_builder.services.quiz_mapper import to_quiz_detail, to_quiz_summary

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
# Integer primary keys are signed 64-bit at most
_MAX_ID = 2**63 - 1


def parse_quiz_id(raw_id: Union[str, int]) -> int:
    """Parse a path identifier, raising ``MalformedIdentifierError`` if it is not an integer."""
    if isinstance(raw_id, bool):
        raise MalformedIdentifierError()
    if isinstance(raw_id, int):
        value = raw_id
    elif isinstance(raw_id, str) and _ID_PATTERN.fullmatch(raw_id.strip()):
        value = int(raw_id.strip())
    else:
        raise MalformedIdentifierError()
    if abs(value) > _MAX_ID:
        raise MalformedIdentifierError()
    return value


class QuizService:
    """Validate, persist and shape quizzes. Holds nothing but the request's session."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, payload: Any) -> QuizDetailOut:
        quiz_in = validate_quiz_payload(payload)
        quiz = quiz_crud.create_quiz(self.db, quiz_in)
        logger.info("Created quiz %s with %d question(s)", quiz.id, len(quiz.questions))
        return to_quiz_detail(quiz)

    def list(self) -> List[QuizSummaryOut]:
        return [to_quiz_summary(row.quiz, row.question_count) for row in quiz_crud.list_quizzes(self.db)]

    def get_by_id(self, raw_id: Union[str, int]) -> QuizDetailOut:
        quiz_id = parse_quiz_id(raw_id)
        quiz = quiz_crud.get_quiz_by_id(self.db, quiz_id)
        if quiz is None:
            raise QuizNotFoundError()
        return to_quiz_detail(quiz)

    def delete_by_id(self, raw_id: Union[str, int]) -> None:
        quiz_id = parse_quiz_id(raw_id)
        if not quiz_crud.delete_quiz(self.db, quiz_id):
            raise QuizNotFoundError()
        logger.info("Deleted quiz %s", quiz_id)
