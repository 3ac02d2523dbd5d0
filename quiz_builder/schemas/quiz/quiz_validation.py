"""Turns untrusted quiz payloads into a validated ``QuizCreate``.

Every violation found in one pass is reported as a ``{"field", "message"}``
pair, with dotted wire-name paths such as ``questions.1.options.0.text``.
"""
from typing import Any, Dict, List, Sequence, Union

from pydantic import ValidationError

from quiz_builder.core.exceptions import QuizValidationError
from quiz_builder.schemas.quiz.quiz_base import QUESTION_TYPES, QuizCreate

_TAG_ERRORS = {"union_tag_invalid", "union_tag_not_found"}
_TAG_MESSAGE = "Question type must be one of " + ", ".join(QUESTION_TYPES)


def _field_path(loc: Sequence[Union[str, int]]) -> str:
    parts = []
    for position, part in enumerate(loc):
        # pydantic inserts the discriminator value after the list index
        if position == 2 and loc[0] == "questions" and part in QUESTION_TYPES:
            continue
        parts.append(str(part))
    return ".".join(parts)


def collect_violations(exc: ValidationError) -> List[Dict[str, str]]:
    violations = []
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        if error.get("type") in _TAG_ERRORS:
            violations.append({"field": _field_path(loc + ("type",)), "message": _TAG_MESSAGE})
            continue
        violations.append({"field": _field_path(loc), "message": error.get("msg", "Invalid value")})
    return violations


def validate_quiz_payload(payload: Any) -> QuizCreate:
    """Validate and normalize a quiz creation payload.

    Pure: no I/O. Raises ``QuizValidationError`` listing all violations.
    """
    try:
        return QuizCreate.model_validate(payload)
    except ValidationError as exc:
        raise QuizValidationError(collect_violations(exc)) from exc
