from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status

from quiz_builder.core.dependencies import get_quiz_service
from quiz_builder.schemas.quiz.quiz_out import QuizDetailOut, QuizSummaryOut
from quiz_builder.services.quiz_service import QuizService

quiz_router = APIRouter(prefix="/quizzes", tags=["Quizzes"])


@quiz_router.post("", response_model=QuizDetailOut, status_code=status.HTTP_201_CREATED)
def create_quiz(payload: Any = Body(...), service: QuizService = Depends(get_quiz_service)):
    # The body is validated by the service so every violation is reported together
    return service.create(payload)


@quiz_router.get("", response_model=List[QuizSummaryOut])
def list_quizzes(service: QuizService = Depends(get_quiz_service)):
    return service.list()


@quiz_router.get("/{quiz_id}", response_model=QuizDetailOut)
def get_quiz(quiz_id: str, service: QuizService = Depends(get_quiz_service)):
    return service.get_by_id(quiz_id)


@quiz_router.delete("/{quiz_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_quiz(quiz_id: str, service: QuizService = Depends(get_quiz_service)):
    service.delete_by_id(quiz_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
