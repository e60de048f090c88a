"""Emotion Data Models."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

SentimentLabel = Literal["positive", "neutral", "negative"]


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response_id: StrictStr = Field(alias="responseId", min_length=1)
    question_id: StrictStr | None = Field(default=None, alias="questionId")
    text: StrictStr

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value


class EmotionScores(BaseModel):
    joy: float = 0.0
    sadness: float = 0.0
    anger: float = 0.0
    fear: float = 0.0
    disgust: float = 0.0


class SentimentScore(BaseModel):
    score: float = 0.0
    label: SentimentLabel = "neutral"


class AnalysisRecord(BaseModel):
    """Document written once per analysed response."""

    model_config = ConfigDict(populate_by_name=True)

    response_id: str = Field(alias="responseId")
    question_id: str | None = Field(default=None, alias="questionId")
    joy: float = 0.0
    sadness: float = 0.0
    anger: float = 0.0
    fear: float = 0.0
    disgust: float = 0.0
    sentiment: float = 0.0
    sentiment_label: SentimentLabel = "neutral"
    model: str
    processed_at: str = Field(alias="processedAt")
    created_at: str = Field(alias="createdAt")
    text_len: int = Field(alias="textLen")
    note: str | None = None
    lang: str | None = None

    def to_document(self) -> dict:
        """Serialize with wire names; questionId stays even when null."""
        data = self.model_dump(by_alias=True)
        for key in ("note", "lang"):
            if data[key] is None:
                del data[key]
        return data


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    analysis_id: str = Field(alias="analysisId")
    emotions: EmotionScores
    sentiment: SentimentScore | None = None
    skipped: str | None = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
