import enum

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, Text, Enum
from sqlalchemy.orm import relationship
from quiz_builder.core.database import Base
from quiz_builder.models.quiz_db.option_db import Option


class QuestionType(str, enum.Enum):
    BOOLEAN = "BOOLEAN"
    INPUT = "INPUT"
    CHECKBOX = "CHECKBOX"


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    text = Column(Text, nullable=False)
    type = Column(Enum(QuestionType, name="question_type"), nullable=False)
    order = Column(Integer, nullable=True)

    # Only the column matching ``type`` is populated, the other stays NULL
    boolean_answer = Column(Boolean, nullable=True)
    input_answer = Column(String, nullable=True)

    quiz_id = Column(Integer, ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)

    quiz = relationship("Quiz", back_populates="questions")
    options = relationship(
        "Option",
        back_populates="question",
        cascade="all, delete-orphan",
        order_by=Option.id,
    )
