"""
Language-related Pydantic models.

Translation, text-to-speech and sentiment analysis request/response bodies.
"""

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str | list[str] | None = Field(
        None, description='Single string or list of strings to translate'
    )
    target_language: str | None = Field(
        None, alias='targetLanguage', description='ISO-639 target code (default from settings)'
    )


class TranslateResponse(BaseModel):
    translations: str | list[str] = Field(
        ..., description='Same shape as the request text (scalar or list)'
    )
    demo: bool | None = None


class SpeechRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str | None = Field(None, description='Text to synthesize')
    language_code: str | None = Field(
        None, alias='languageCode', description='BCP-47 voice locale (default from settings)'
    )


class SentimentRequest(BaseModel):
    text: str | None = Field(None, description='Text to analyze')


class SentimentResult(BaseModel):
    """Document-level sentiment."""

    score: float = Field(..., ge=-1.0, le=1.0, description='Negative (-1) to positive (+1)')
    magnitude: float = Field(..., ge=0.0, description='Overall emotional strength')


class SentimentResponse(BaseModel):
    sentiment: SentimentResult
    demo: bool | None = None
