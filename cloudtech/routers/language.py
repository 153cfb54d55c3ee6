"""
Language Router

Translation, text-to-speech and sentiment analysis endpoints.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from cloudtech.core.dependencies import LanguageServiceDep
from cloudtech.schemas.common import ErrorResponse
from cloudtech.schemas.language import (
    SentimentRequest,
    SentimentResponse,
    SpeechRequest,
    TranslateRequest,
    TranslateResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix='/api',
    tags=['Language'],
    responses={
        400: {'model': ErrorResponse, 'description': 'No text provided'},
        500: {'model': ErrorResponse, 'description': 'Upstream provider error'},
    },
)


@router.post('/translate', response_model=TranslateResponse, response_model_exclude_none=True)
async def translate(language: LanguageServiceDep, request: TranslateRequest | None = None):
    """
    Translate a string or list of strings (default target: Romanian).

    The response mirrors the input shape. Without credentials a small
    built-in dictionary is used and unknown words are returned unchanged.
    """
    request = request or TranslateRequest()
    translations, demo = await language.translate(request.text, request.target_language)
    return TranslateResponse(translations=translations, demo=demo or None)


@router.post(
    '/tts',
    response_class=Response,
    responses={
        200: {'content': {'audio/mpeg': {}}, 'description': 'MP3 audio'},
        503: {'model': ErrorResponse, 'description': 'TTS not configured'},
    },
)
async def text_to_speech(language: LanguageServiceDep, request: SpeechRequest | None = None):
    """
    Text-to-speech as MP3.

    There is no demo audio: without credentials this returns 503.
    """
    request = request or SpeechRequest()
    audio = await language.synthesize(request.text, request.language_code)
    return Response(content=audio, media_type='audio/mpeg')


@router.post('/sentiment', response_model=SentimentResponse, response_model_exclude_none=True)
async def sentiment(language: LanguageServiceDep, request: SentimentRequest | None = None):
    """
    Document sentiment: score in [-1, 1] and magnitude >= 0.

    Demo mode scores positive/negative keywords.
    """
    request = request or SentimentRequest()
    result, demo = await language.analyze_sentiment(request.text)
    return SentimentResponse(sentiment=result, demo=demo or None)
