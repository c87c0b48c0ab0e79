from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, StrictBool

from graph_tutor import __version__
from graph_tutor.errors import TutorError
from graph_tutor.graph.store import GraphStore
from graph_tutor.tutor import ResponseAttempt, ResponseLogger, SessionStarter, VocabularyReader

logger = logging.getLogger(__name__)

LIVENESS_TEXT = "Graph Tutor Server is running."


class LogResponseIn(BaseModel):
    # Presence is checked by validate_attempt so every failure maps to 400.
    sessionId: str | None = None
    wordText: str | None = None
    exerciseType: str | None = None
    prompt: str | None = None
    userAnswer: str | None = None
    correct: StrictBool | None = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(store: GraphStore) -> FastAPI:
    app = FastAPI(title="Graph Tutor", version=__version__)

    vocabulary = VocabularyReader(store)
    sessions = SessionStarter(store)
    responses = ResponseLogger(store)

    @app.exception_handler(TutorError)
    async def tutor_error_handler(request: Request, exc: TutorError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
            return _error(exc.status_code, "graph store request failed")
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return _error(exc.status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("%s %s invalid body: %s", request.method, request.url.path, exc.errors())
        return _error(400, "missing required fields")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return _error(500, "internal server error")

    @app.get("/", response_class=PlainTextResponse)
    def liveness():
        return LIVENESS_TEXT

    @app.get("/vocab")
    def vocab():
        return {"words": vocabulary.list_words()}

    @app.get("/api/words")
    def words():
        return {"words": vocabulary.list_words_indexed()}

    @app.post("/api/session")
    def start_session():
        return {"sessionId": sessions.start()}

    @app.get("/api/session/{session_id}/vocab-errors")
    def session_vocab_errors(session_id: str):
        errors = sessions.vocab_errors(session_id)
        return {
            "sessionId": session_id,
            "errors": [{"word": e.word, "count": e.count} for e in errors],
        }

    @app.post("/api/log-response")
    def log_response(payload: LogResponseIn):
        logged = responses.log(
            ResponseAttempt(
                session_id=payload.sessionId,
                word_text=payload.wordText,
                prompt=payload.prompt,
                correct=payload.correct,
                user_answer=payload.userAnswer,
                exercise_type=payload.exerciseType,
            )
        )
        return {"sessionId": logged.session_id, "word": logged.word, "correct": logged.correct}

    return app
