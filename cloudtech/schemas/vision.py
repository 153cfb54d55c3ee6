"""
Vision-related Pydantic models.

Label detection, object localization and the composite vision pipeline.
Wire names are camelCase; Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field


class DetectedLabel(BaseModel):
    """Single label annotation for a whole image."""

    description: str = Field(..., description='Label text (e.g. Computer)')
    score: float = Field(..., ge=0.0, le=1.0, description='Confidence (0-1)')


class Vertex(BaseModel):
    """Bounding polygon vertex, normalized to [0, 1]."""

    x: float = 0.0
    y: float = 0.0


class BoundingPoly(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    normalized_vertices: list[Vertex] = Field(
        default_factory=list, alias='normalizedVertices'
    )


class DetectedObject(BaseModel):
    """Localized object with an optional bounding polygon."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description='Object name (e.g. Laptop)')
    score: float = Field(..., ge=0.0, le=1.0, description='Confidence (0-1)')
    bounding_poly: BoundingPoly | None = Field(None, alias='boundingPoly')


class LabelsResponse(BaseModel):
    labels: list[DetectedLabel] = Field(default_factory=list)
    demo: bool | None = Field(None, description='Present (true) when simulated data is returned')


class ObjectsResponse(BaseModel):
    objects: list[DetectedObject] = Field(default_factory=list)
    demo: bool | None = Field(None, description='Present (true) when simulated data is returned')


class TranslationPair(BaseModel):
    """Source label and its translation, matched by position."""

    source: str
    translated: str


class StageDemoStatus(BaseModel):
    """Whether each pipeline stage ran on its demo fallback."""

    labels: bool
    translations: bool
    speech: bool


class PipelineResponse(BaseModel):
    """
    Composite result of detect -> translate -> synthesize.

    `demo` reflects the label detection stage only; `demoStages` carries the
    status of every stage.
    """

    model_config = ConfigDict(populate_by_name=True)

    labels: list[DetectedLabel] = Field(default_factory=list)
    translations: list[TranslationPair] = Field(default_factory=list)
    audio_base64: str | None = Field(
        None, alias='audioBase64', description='MP3 audio, base64-encoded (absent without TTS)'
    )
    demo: bool = Field(..., description='True when label detection used demo data')
    demo_stages: StageDemoStatus = Field(..., alias='demoStages')
