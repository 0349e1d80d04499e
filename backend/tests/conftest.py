"""Shared test fixtures and configuration."""
import random

import pytest

from vidprompt.models.prompt import Elements, PromptConfig


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch: pytest.MonkeyPatch):
    """Clear settings overrides and the settings cache around every test."""
    from vidprompt.core.config import get_settings

    for name in (
        "TEMPLATES_FILE",
        "VARIATION_COUNT",
        "DEFAULT_PROMPT_LIMIT",
        "PROMPT_VERSION",
        "FRONTEND_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def base_config() -> PromptConfig:
    """Minimal config: no optional sections, no effects."""
    return PromptConfig(
        category="Sports & Athletics",
        style="Cinematic",
        duration="5-10 seconds",
        complexity="Medium",
        elements=Elements(weather_effects=False, dynamic_lighting=False, camera_movement=False),
    )


@pytest.fixture
def full_config() -> PromptConfig:
    """Every section and sub-toggle enabled."""
    return PromptConfig.model_validate(
        {
            "category": "Urban & Street",
            "style": "Noir",
            "duration": "10-15 seconds",
            "complexity": "Complex",
            "elements": {
                "weather_effects": True,
                "dynamic_lighting": True,
                "camera_movement": True,
            },
            "enable_shot_details": True,
            "enable_scene_details": True,
            "enable_advanced_details": True,
            "shot": {
                "composition": "Wide shot",
                "camera_motion": "dolly",
                "frame_rate": "24 fps",
                "film_grain": True,
            },
            "subject": {"include_description": True, "include_wardrobe": True},
            "scene": {
                "include_location": True,
                "include_time_of_day": True,
                "include_environment": True,
            },
            "visual_details": {"include_action": True, "include_props": True},
            "cinematography": {"include_lighting": True, "include_tone": True},
            "audio": {"include_ambient": True, "include_dialogue": True},
            "color_palette": True,
        }
    )
