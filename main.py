import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
from quiz_builder.core.config import settings
from quiz_builder.core.database import Base, engine
from quiz_builder.core.exceptions import register_exception_handlers
from quiz_builder.core.logging_config import setup_logging
from quiz_builder.models.quiz_db.quiz_db import Quiz  # noqa: F401  registers the quiz tables
from quiz_builder.routes.quiz.quiz_routers import quiz_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=engine)
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="Quiz Builder API",
    description="Author quizzes made of boolean, input and checkbox questions",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(quiz_router)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>Quiz Builder</title>
        </head>
        <body>
            <h1>Quiz Builder API</h1>
            <p>See the API documentation <a href="/docs">here</a>.</p>
        </body>
    </html>
    """


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=False)
