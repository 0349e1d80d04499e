"""PromptService: generates, persists and retrieves video prompts."""
import hashlib
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from vidprompt.core.logging import setup_logging
from vidprompt.models.prompt import (
    EnabledFeatures,
    GeneratedPrompt,
    PromptConfig,
    PromptCreate,
    PromptMetadata,
)
from vidprompt.services.assembler import PromptAssembler

if TYPE_CHECKING:
    from vidprompt.services.storage import InMemoryStorage

logger = setup_logging("prompts")


class PromptNotFoundError(LookupError):
    """Raised when a prompt id is not in storage."""


def config_hash(config: PromptConfig) -> str:
    """Short stable digest of a validated config."""
    return hashlib.sha1(config.model_dump_json().encode("utf-8")).hexdigest()[:12]


class PromptService:
    """Orchestrates prompt generation.

    Responsibilities:
    1. Delegate text assembly to PromptAssembler
    2. Attach generation metadata (version, enabled sections, config hash)
    3. Persist the finished prompt; nothing is stored if assembly fails
    4. Serve history lookups from storage
    """

    def __init__(
        self,
        storage: "InMemoryStorage",
        assembler: Optional[PromptAssembler] = None,
        version: str = "2.0.0",
        variation_count: int = 3,
        default_limit: Optional[int] = None,
    ) -> None:
        self.storage = storage
        self.assembler = assembler or PromptAssembler()
        self.version = version
        self.variation_count = variation_count
        self.default_limit = default_limit

    def generate(self, config: PromptConfig) -> GeneratedPrompt:
        """Assemble a prompt for ``config`` and store it.

        Returns:
            The persisted GeneratedPrompt with id and createdAt assigned.
        """
        text = self.assembler.assemble(config)
        metadata = PromptMetadata(
            generated_at=datetime.now(timezone.utc).isoformat(),
            version=self.version,
            config_hash=config_hash(config),
            enabled_features=EnabledFeatures(
                shot_details=config.enable_shot_details,
                scene_details=config.enable_scene_details,
                advanced_details=config.enable_advanced_details,
            ),
        )
        prompt = self.storage.create_prompt(
            PromptCreate(
                prompt=text,
                category=config.category,
                style=config.style,
                duration=config.duration,
                complexity=config.complexity,
                elements=config.elements,
                metadata=metadata,
            )
        )
        logger.info(
            "generated prompt: category=%s style=%s chars=%d",
            config.category,
            config.style,
            len(text),
            extra={"prompt_id": prompt.id},
        )
        return prompt

    def variations(self, config: PromptConfig, count: Optional[int] = None) -> list[str]:
        """Return ``count`` (default: configured count) re-rolled prompts. Not persisted."""
        if count is None:
            count = self.variation_count
        return self.assembler.variations(config, count)

    def preview(self, config: PromptConfig) -> str:
        return self.assembler.preview(config)

    def list_prompts(self, limit: Optional[int] = None) -> list[GeneratedPrompt]:
        """Newest first. Falls back to ``default_limit`` when ``limit`` is None."""
        if limit is None:
            limit = self.default_limit
        return self.storage.get_prompts(limit)

    def get_prompt(self, prompt_id: int) -> GeneratedPrompt:
        """Return one stored prompt.

        Raises:
            PromptNotFoundError: Unknown id.
        """
        prompt = self.storage.get_prompt_by_id(prompt_id)
        if prompt is None:
            raise PromptNotFoundError(f"Prompt not found: {prompt_id}")
        return prompt
