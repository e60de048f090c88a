"""Emotion Engine - validate, score, normalize and persist one response."""
import logging
import math
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from apps.core.config import Settings
from apps.core.errors import InvalidPayload
from apps.core.log import log_event
from apps.core.retry import RetryPolicy, retry
from apps.emotion.models import (
    AnalysisRecord,
    AnalyzeRequest,
    AnalyzeResponse,
    EmotionScores,
    SentimentScore,
)
from apps.emotion.nlu import WatsonEmotionClient
from apps.emotion.store import AnalysisStore

logger = logging.getLogger(__name__)

EMOTIONS = ("joy", "sadness", "anger", "fear", "disgust")
SENTIMENT_LABELS = ("positive", "neutral", "negative")
NLU_RETRY_POLICY = RetryPolicy(attempts=2, delay_seconds=0.6)
INVALID_PAYLOAD_MESSAGE = "Missing or invalid payload. Expect { responseId, questionId?, text }"


def parse_payload(raw: bytes | str) -> AnalyzeRequest:
    """Parse a request body; malformed JSON and missing fields both raise InvalidPayload."""
    try:
        return AnalyzeRequest.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidPayload(INVALID_PAYLOAD_MESSAGE) from e


def clean_text(text: str, max_length: int) -> str:
    return text.strip()[:max_length]


def _score(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def _section(data: Any, *path: str) -> dict:
    for key in path:
        data = data.get(key) if isinstance(data, dict) else None
    return data if isinstance(data, dict) else {}


def normalize(result: Any) -> tuple[EmotionScores, SentimentScore]:
    """
    Extract emotion and sentiment from a Watson NLU result.

    Missing or unusable fields default to 0 / "neutral"; emotion scores are
    clamped into [0, 1].
    """
    emotion = _section(result, "emotion", "document", "emotion")
    sentiment = _section(result, "sentiment", "document")

    emotions = EmotionScores(
        **{name: min(max(_score(emotion.get(name)), 0.0), 1.0) for name in EMOTIONS}
    )

    score = sentiment.get("score")
    label = sentiment.get("label")
    return emotions, SentimentScore(
        score=_score(score) if isinstance(score, (int, float)) else 0.0,
        label=label if label in SENTIMENT_LABELS else "neutral",
    )


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EmotionEngine:
    """Analyses one response and writes exactly one record for it."""

    def __init__(
        self,
        nlu: WatsonEmotionClient,
        store: AnalysisStore,
        settings: Settings,
        retry_policy: RetryPolicy = NLU_RETRY_POLICY,
    ) -> None:
        self.nlu = nlu
        self.store = store
        self.settings = settings
        self.retry_policy = retry_policy

    def analyze(self, request: AnalyzeRequest) -> AnalyzeResponse:
        self.store.check_config()

        language = self.settings.watson.language
        min_length = self.settings.watson.min_length
        text = clean_text(request.text, self.settings.max_text_length)
        now = utc_now_iso()

        log_event(
            logger, logging.INFO, "Watson NLU analyze start",
            responseId=request.response_id,
            questionId=request.question_id,
            textLen=len(text),
            lang=language,
        )

        if len(text) < min_length:
            return self._save_too_short(request, text, now)

        self.nlu.check_config()
        result = retry(lambda: self.nlu.analyze(text, language), self.retry_policy)
        emotions, sentiment = normalize(result)

        record = AnalysisRecord(
            response_id=request.response_id,
            question_id=request.question_id,
            **emotions.model_dump(),
            sentiment=sentiment.score,
            sentiment_label=sentiment.label,
            model=self.settings.model_tag,
            processed_at=now,
            created_at=now,
            text_len=len(text),
            lang=language,
        )
        analysis_id = self.store.create(record)

        log_event(
            logger, logging.INFO, "Watson NLU saved",
            analysisId=analysis_id,
            responseId=request.response_id,
            questionId=request.question_id,
        )
        return AnalyzeResponse(analysis_id=analysis_id, emotions=emotions, sentiment=sentiment)

    def _save_too_short(self, request: AnalyzeRequest, text: str, now: str) -> AnalyzeResponse:
        """Persist a neutral record without calling the NLU provider."""
        record = AnalysisRecord(
            response_id=request.response_id,
            question_id=request.question_id,
            model=self.settings.model_tag,
            processed_at=now,
            created_at=now,
            text_len=len(text),
            note="too_short",
        )
        analysis_id = self.store.create(record)

        log_event(
            logger, logging.INFO, "Neutral analysis saved (too short)",
            analysisId=analysis_id,
        )
        return AnalyzeResponse(
            analysis_id=analysis_id,
            emotions=EmotionScores(),
            skipped="too_short",
        )
