from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator
from pydantic_core import PydanticCustomError


def strip_required(value: str, message: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("required_text", message)
    return value


class InputModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class OptionIn(InputModel):
    text: StrictStr
    is_correct: StrictBool = Field(alias="isCorrect")

    @field_validator("text")
    @classmethod
    def _text_required(cls, value: str) -> str:
        return strip_required(value, "Option text is required")


class QuestionBase(InputModel):
    text: StrictStr
    # None means "not supplied"; the gateway then falls back to the position
    order: Optional[Annotated[StrictInt, Field(ge=0)]] = None

    @field_validator("text")
    @classmethod
    def _text_required(cls, value: str) -> str:
        return strip_required(value, "Question text is required")

    @field_validator("order", mode="before")
    @classmethod
    def _order_if_supplied(cls, value):
        # Only runs for a supplied key: omit ``order`` rather than sending null
        if value is None:
            raise PydanticCustomError("order_null", "Order must be a non-negative integer when provided")
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class BooleanQuestionIn(QuestionBase):
    type: Literal["BOOLEAN"]
    boolean_answer: StrictBool = Field(alias="booleanAnswer")


class InputQuestionIn(QuestionBase):
    type: Literal["INPUT"]
    input_answer: StrictStr = Field(alias="inputAnswer")

    @field_validator("input_answer")
    @classmethod
    def _answer_required(cls, value: str) -> str:
        return strip_required(value, "Correct answer is required")


class CheckboxQuestionIn(QuestionBase):
    type: Literal["CHECKBOX"]
    options: List[OptionIn]

    @field_validator("options")
    @classmethod
    def _options_rules(cls, options: List[OptionIn]) -> List[OptionIn]:
        # Runs only once every option parsed, so the correct-option rule
        # sees a structurally valid list.
        if len(options) < 2:
            raise PydanticCustomError("too_few_options", "At least two answer options are required")
        if not any(option.is_correct for option in options):
            raise PydanticCustomError(
                "no_correct_option",
                "Checkbox questions must include at least one correct option",
            )
        return options


QuestionIn = Annotated[
    Union[BooleanQuestionIn, InputQuestionIn, CheckboxQuestionIn],
    Field(discriminator="type"),
]

QUESTION_TYPES = ("BOOLEAN", "INPUT", "CHECKBOX")


class QuizCreate(InputModel):
    title: StrictStr
    questions: List[QuestionIn]

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        return strip_required(value, "Quiz title is required")

    @field_validator("questions")
    @classmethod
    def _at_least_one_question(cls, questions: list) -> list:
        if not questions:
            raise PydanticCustomError("no_questions", "Add at least one question")
        return questions
