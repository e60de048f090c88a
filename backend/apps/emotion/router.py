"""Emotion API Router."""
import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from apps.core.config import settings
from apps.core.errors import InvalidPayload
from apps.core.log import error_fields, log_event
from apps.emotion.engine import EmotionEngine, parse_payload
from apps.emotion.models import AnalyzeResponse, ErrorResponse
from apps.emotion.nlu import WatsonEmotionClient
from apps.emotion.store import AnalysisStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/emotion", tags=["Emotion"])

# Singleton
_engine: EmotionEngine | None = None


def get_engine() -> EmotionEngine:
    global _engine
    if _engine is None:
        _engine = EmotionEngine(
            nlu=WatsonEmotionClient(settings.watson),
            store=AnalysisStore(settings.appwrite),
            settings=settings,
        )
    return _engine


def _failure(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=error).model_dump())


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": "Emotion"}


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(request: Request):
    try:
        payload = parse_payload(await request.body())
        return await run_in_threadpool(get_engine().analyze, payload)
    except InvalidPayload as e:
        log_event(logger, logging.WARNING, "Rejected payload", error=str(e))
        return _failure(400, str(e))
    except Exception as e:
        log_event(logger, logging.ERROR, "Watson NLU processing failed", **error_fields(e))
        return _failure(500, str(e) or "Internal error")
