"""Prompt assembly: turns a PromptConfig into a natural-language video prompt.

The output is a single string (format version 2.0.0) built from an ordered
list of sections. Which sections appear depends only on the configuration
toggles; the text inside a section is drawn at random from the content
tables, so two calls with the same config share structure but not wording.
"""
import logging
import random
import re
from typing import NamedTuple, Optional

from vidprompt.models.prompt import Complexity, PromptConfig
from vidprompt.services import content
from vidprompt.services.content import Chooser, select_fragment

logger = logging.getLogger(__name__)

DEFAULT_DIALOGUE_SECONDS = 5
DEFAULT_COMPOSITION = "Medium shot"

_LEADING_INT = re.compile(r"^\s*(\d+)")


class PromptSection(NamedTuple):
    name: str
    text: str


def dialogue_seconds(duration: str) -> int:
    """Return the leading integer of a duration range such as "5-10 seconds".

    Falls back to DEFAULT_DIALOGUE_SECONDS when there is no leading number
    or it is zero.
    """
    match = _LEADING_INT.match(duration)
    if match is None:
        return DEFAULT_DIALOGUE_SECONDS
    return int(match.group(1)) or DEFAULT_DIALOGUE_SECONDS


class PromptAssembler:
    """Builds prompt text from configuration and the content tables.

    Args:
        rng: Random source for fragment selection and complexity re-rolls.
            Pass a seeded ``random.Random`` for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def assemble(self, config: PromptConfig) -> str:
        """Generate one prompt string for ``config``."""
        return self.render(self.sections(config))

    def preview(self, config: PromptConfig) -> str:
        """Render ``config`` using the first candidate of every table.

        Same sections as ``assemble`` but fully deterministic.
        """
        return self.render(self.sections(config, choose=content.first_fragment))

    def variations(self, config: PromptConfig, count: int) -> list[str]:
        """Generate ``count`` prompts, re-rolling complexity for each one.

        Duplicates are possible and acceptable.
        """
        complexities = [c.value for c in Complexity]
        results: list[str] = []
        for _ in range(count):
            variant = config.model_copy(update={"complexity": self._rng.choice(complexities)})
            results.append(self.assemble(variant))
        logger.debug("Generated %d variations for category=%s", count, config.category)
        return results

    @staticmethod
    def render(sections: list[PromptSection]) -> str:
        return " ".join(section.text for section in sections if section.text)

    def sections(
        self, config: PromptConfig, choose: Optional[Chooser] = None
    ) -> list[PromptSection]:
        """Return the ordered prompt sections enabled by ``config``."""
        pick = choose or self._rng.choice
        category = config.category
        style = config.style

        def by_category(table: dict[str, list[str]]) -> str:
            return select_fragment(table, category, content.DEFAULT_CATEGORY, pick)

        def by_style(table: dict[str, list[str]]) -> str:
            return select_fragment(table, style, content.DEFAULT_STYLE, pick)

        scene_on = config.enable_scene_details
        advanced_on = config.enable_advanced_details
        parts: list[PromptSection] = []

        # --- Subject and action ---
        parts.append(PromptSection("subject", f"{by_category(content.SUBJECTS)}."))
        if scene_on and config.subject and config.subject.include_wardrobe:
            wardrobe = by_category(content.WARDROBE)
            parts.append(PromptSection("wardrobe", f"Wearing {wardrobe.lower()}."))
        parts.append(PromptSection("action", f"{by_category(content.ACTIONS)}."))

        # --- Shot composition ---
        shot = config.shot
        if config.enable_shot_details and shot is not None:
            shot_details = [shot.composition or DEFAULT_COMPOSITION]
            if shot.camera_motion and shot.camera_motion.lower() != "static":
                shot_details.append(f"{shot.camera_motion} camera movement")
            if shot.frame_rate:
                shot_details.append(f"shot at {shot.frame_rate}")
            if shot.film_grain:
                shot_details.append("with fine film grain texture")
            parts.append(PromptSection("shot", ", ".join(shot_details) + "."))

        # --- Scene ---
        if scene_on:
            scene_elements: list[str] = []
            if config.scene and config.scene.include_location:
                scene_elements.append(f"Location: {by_category(content.LOCATIONS)}")
            if config.scene and config.scene.include_time_of_day:
                scene_elements.append(f"Time: {pick(content.TIMES_OF_DAY)}")
            if config.scene and config.scene.include_environment:
                scene_elements.append(by_category(content.ENVIRONMENTS))
            if scene_elements:
                parts.append(PromptSection("scene", ". ".join(scene_elements) + "."))
            if config.visual_details and config.visual_details.include_props:
                props = by_category(content.PROPS)
                parts.append(PromptSection("props", f"Scene includes: {props.lower()}."))

        # --- Cinematography and effects ---
        cinematography: list[str] = []
        if advanced_on and config.cinematography:
            if config.cinematography.include_lighting:
                cinematography.append(f"Lighting: {by_style(content.LIGHTING)}")
            if config.cinematography.include_tone:
                cinematography.append(f"Overall tone: {by_style(content.TONES)}")
        effects = [
            phrase
            for name, phrase in content.EFFECT_PHRASES.items()
            if getattr(config.elements, name)
        ]
        if effects:
            cinematography.append(f"Enhanced with: {', '.join(effects)}")
        if cinematography:
            parts.append(PromptSection("cinematography", ". ".join(cinematography) + "."))

        # --- Audio and color ---
        if advanced_on:
            if config.audio and config.audio.include_ambient:
                parts.append(PromptSection("audio", f"Audio: {by_category(content.AMBIENT_AUDIO)}."))
            if config.audio and config.audio.include_dialogue:
                seconds = dialogue_seconds(config.duration)
                parts.append(
                    PromptSection(
                        "dialogue",
                        f"Features {seconds}-second dialogue segment with documentary-style narration.",
                    )
                )
            if config.color_palette:
                palette = by_style(content.COLOR_PALETTES)
                parts.append(PromptSection("color_palette", f"Color palette: {palette}."))

        # --- Modifiers ---
        style_modifier = content.STYLE_MODIFIERS.get(style)
        if style_modifier:
            parts.append(PromptSection("style", style_modifier))
        complexity_modifier = content.COMPLEXITY_MODIFIERS.get(config.complexity)
        if complexity_modifier:
            parts.append(PromptSection("complexity", complexity_modifier))
        pacing = content.DURATION_PACING.get(config.duration, content.DEFAULT_PACING)
        parts.append(PromptSection("duration", f"Scene duration: {config.duration}, {pacing}."))
        parts.append(PromptSection("closing", content.CLOSING_SENTENCE))

        return parts
