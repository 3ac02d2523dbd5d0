from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OutModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OptionOut(OutModel):
    id: int
    text: str
    is_correct: bool


class QuestionOutBase(OutModel):
    id: int
    text: str
    order: Optional[int]


class BooleanQuestionOut(QuestionOutBase):
    type: Literal["BOOLEAN"]
    boolean_answer: bool
    input_answer: None = None
    options: List[OptionOut] = []


class InputQuestionOut(QuestionOutBase):
    type: Literal["INPUT"]
    boolean_answer: None = None
    input_answer: str
    options: List[OptionOut] = []


class CheckboxQuestionOut(QuestionOutBase):
    type: Literal["CHECKBOX"]
    boolean_answer: None = None
    input_answer: None = None
    options: List[OptionOut]


QuestionOut = Annotated[
    Union[BooleanQuestionOut, InputQuestionOut, CheckboxQuestionOut],
    Field(discriminator="type"),
]


class QuizSummaryOut(OutModel):
    id: int
    title: str
    question_count: int
    created_at: str


class QuizDetailOut(OutModel):
    id: int
    title: str
    created_at: str
    updated_at: str
    questions: List[QuestionOut]
