from fastapi import Depends
from sqlalchemy.orm import Session

from quiz_builder.core.database import get_db
from quiz_builder.services.quiz_service import QuizService


def get_quiz_service(db: Session = Depends(get_db)) -> QuizService:
    return QuizService(db)
