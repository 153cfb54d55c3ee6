"""
Vision pipeline orchestrator.

Chains three dependent stages for one image:

    image bytes
      ↓
    1. label detection   (top N labels, or 3 canned labels in demo mode)
      ↓
    2. translation       (one batched call, or static table with identity fallback)
      ↓
    3. speech synthesis  ("<prefix><t1>, <t2>, ..." as MP3, or no audio)

Failure policy:
- Stage 1 and live Stage 2 errors abort the request (UpstreamServiceError).
- Stage 3 never aborts: missing provider or any failure yields audio=None.

Each stage reads its provider from the capability set when it runs.
"""

import logging
import time
from dataclasses import dataclass, field

from cloudtech.config.settings import Settings
from cloudtech.core.exceptions import UpstreamServiceError
from cloudtech.providers.base import CapabilitySet
from cloudtech.schemas.vision import DetectedLabel, TranslationPair
from cloudtech.utils.upstream import call_upstream


logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """
    Per-request pipeline output, discarded once the response is sent.

    `demo` reflects Stage 1 only. `stage_demo` records every stage.
    """

    labels: list[DetectedLabel] = field(default_factory=list)
    translations: list[TranslationPair] = field(default_factory=list)
    audio: bytes | None = None
    demo: bool = False
    stage_demo: dict[str, bool] = field(default_factory=dict)


class VisionPipelineService:
    """Detect -> translate -> synthesize for a single image."""

    def __init__(self, capabilities: CapabilitySet, settings: Settings):
        self.capabilities = capabilities
        self.settings = settings

    async def run(self, content: bytes) -> PipelineResult:
        t0 = time.perf_counter()
        result = PipelineResult()

        # 1) Label detection
        result.labels, result.demo = await self.detect(content)
        result.stage_demo['labels'] = result.demo

        # 2) Translation
        result.translations, result.stage_demo['translations'] = await self.translate(
            [label.description for label in result.labels]
        )

        # 3) Speech synthesis
        result.audio, result.stage_demo['speech'] = await self.synthesize(
            [pair.translated for pair in result.translations]
        )

        logger.info(
            f'[PIPELINE] {len(result.labels)} labels, audio={result.audio is not None}, '
            f'stages={result.stage_demo}, total={(time.perf_counter() - t0) * 1000:.1f}ms'
        )
        return result

    async def detect(self, content: bytes) -> tuple[list[DetectedLabel], bool]:
        detector = self.capabilities.label_detector
        labels = await call_upstream(
            detector.name,
            detector.detect_top_labels,
            content,
            self.settings.pipeline_max_labels,
            timeout=self.settings.upstream_timeout,
        )
        logger.info(f'[PIPELINE] Step 1: {[label.description for label in labels]}')
        return labels, detector.demo

    async def translate(self, sources: list[str]) -> tuple[list[TranslationPair], bool]:
        translator = self.capabilities.translator
        translated = await call_upstream(
            translator.name,
            translator.translate,
            sources,
            self.settings.target_language,
            timeout=self.settings.upstream_timeout,
        )
        if len(translated) != len(sources):
            raise UpstreamServiceError(
                translator.name,
                f'Expected {len(sources)} translations, received {len(translated)}',
            )

        pairs = [
            TranslationPair(source=source, translated=target)
            for source, target in zip(sources, translated)
        ]
        logger.info(f'[PIPELINE] Step 2: {translated} (demo={translator.demo})')
        return pairs, translator.demo

    def compose_sentence(self, translations: list[str]) -> str:
        return f'{self.settings.speech_prefix}{", ".join(translations)}'

    async def synthesize(self, translations: list[str]) -> tuple[bytes | None, bool]:
        synthesizer = self.capabilities.speech_synthesizer
        if synthesizer.demo:
            logger.info('[PIPELINE] Step 3: skipped (speech synthesis not configured)')
            return None, True

        sentence = self.compose_sentence(translations)
        try:
            audio = await call_upstream(
                synthesizer.name,
                synthesizer.synthesize,
                sentence,
                self.settings.speech_language_code,
                timeout=self.settings.upstream_timeout,
            )
        except UpstreamServiceError as e:
            logger.warning(f'[PIPELINE] Step 3: synthesis failed, returning without audio: {e}')
            return None, False

        logger.info(f'[PIPELINE] Step 3: {len(audio)} bytes of audio')
        return audio, False
