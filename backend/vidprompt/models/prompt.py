"""Prompt configuration and generated prompt data models."""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """Content categories with dedicated fragment tables."""

    sports_athletics = "Sports & Athletics"
    urban_street = "Urban & Street"
    nature_wildlife = "Nature & Wildlife"
    vehicle_action = "Vehicle Action"
    human_drama = "Human Drama"
    adventure_extreme = "Adventure & Extreme"


class Style(str, Enum):
    """Visual styles."""

    cinematic = "Cinematic"
    documentary = "Documentary"
    commercial = "Commercial"
    artistic = "Artistic"
    vintage = "Vintage"
    modern = "Modern"
    noir = "Noir"
    colorful = "Colorful"


class Duration(str, Enum):
    """Clip duration ranges."""

    flash = "1-3 seconds"
    short = "3-5 seconds"
    medium = "5-10 seconds"
    extended = "10-15 seconds"
    long = "15-30 seconds"


class Complexity(str, Enum):
    """Composition complexity levels."""

    simple = "Simple"
    medium = "Medium"
    complex = "Complex"


class Elements(BaseModel):
    """Legacy flat effect toggles, always evaluated."""

    model_config = ConfigDict(frozen=True)

    weather_effects: StrictBool
    dynamic_lighting: StrictBool
    camera_movement: StrictBool


class ShotOptions(BaseModel):
    composition: Optional[str] = None
    camera_motion: Optional[str] = None  # "static" means no camera movement
    frame_rate: Optional[str] = None
    film_grain: StrictBool = False


class SubjectOptions(BaseModel):
    include_description: StrictBool = False
    include_wardrobe: StrictBool = False


class SceneOptions(BaseModel):
    include_location: StrictBool = False
    include_time_of_day: StrictBool = False
    include_environment: StrictBool = False


class VisualDetailOptions(BaseModel):
    include_action: StrictBool = False
    include_props: StrictBool = False


class CinematographyOptions(BaseModel):
    include_lighting: StrictBool = False
    include_tone: StrictBool = False


class AudioOptions(BaseModel):
    include_ambient: StrictBool = False
    include_dialogue: StrictBool = False


class PromptConfig(BaseModel):
    """User-selected generation options.

    category/style/duration/complexity are open strings: only their type is
    validated here. Values outside the known enums are accepted and degrade
    to fallback content during assembly. Every optional group that is absent
    is treated as disabled.
    """

    category: str
    style: str
    duration: str
    complexity: str
    elements: Elements

    enable_shot_details: StrictBool = False
    enable_scene_details: StrictBool = False
    enable_advanced_details: StrictBool = False

    shot: Optional[ShotOptions] = None
    subject: Optional[SubjectOptions] = None
    scene: Optional[SceneOptions] = None
    visual_details: Optional[VisualDetailOptions] = None
    cinematography: Optional[CinematographyOptions] = None
    audio: Optional[AudioOptions] = None
    color_palette: StrictBool = False


class EnabledFeatures(BaseModel):
    model_config = ConfigDict(frozen=True)

    shot_details: bool = False
    scene_details: bool = False
    advanced_details: bool = False


class PromptMetadata(BaseModel):
    """Generation metadata stored alongside each prompt."""

    model_config = ConfigDict(frozen=True)

    generated_at: str
    version: str
    config_hash: str
    enabled_features: EnabledFeatures


class PromptCreate(BaseModel):
    """A generated prompt before the storage adapter assigns id/createdAt."""

    prompt: str
    category: str
    style: str
    duration: str
    complexity: str
    elements: Elements
    metadata: PromptMetadata


class GeneratedPrompt(PromptCreate):
    """Persisted prompt. Immutable once stored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: int
    created_at: datetime


class VariationsResponse(BaseModel):
    variations: list[str]


class PreviewResponse(BaseModel):
    prompt: str


class PromptOptions(BaseModel):
    """Known option values for the configuration form."""

    categories: list[str] = Field(default_factory=lambda: [c.value for c in Category])
    styles: list[str] = Field(default_factory=lambda: [s.value for s in Style])
    durations: list[str] = Field(default_factory=lambda: [d.value for d in Duration])
    complexities: list[str] = Field(default_factory=lambda: [c.value for c in Complexity])
    default_category: str = Category.sports_athletics.value
    default_style: str = Style.cinematic.value
