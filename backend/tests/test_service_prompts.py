"""Tests for PromptService."""
import random
from unittest.mock import MagicMock

import pytest

from vidprompt.models.prompt import PromptConfig
from vidprompt.services.assembler import PromptAssembler
from vidprompt.services.prompts import PromptNotFoundError, PromptService, config_hash
from vidprompt.services.storage import InMemoryStorage


@pytest.fixture
def service(rng: random.Random) -> PromptService:
    return PromptService(storage=InMemoryStorage(), assembler=PromptAssembler(rng=rng))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestPromptServiceConstruction:
    def test_stores_storage(self) -> None:
        store = InMemoryStorage()
        assert PromptService(storage=store).storage is store

    def test_creates_default_assembler(self) -> None:
        assert isinstance(PromptService(storage=InMemoryStorage()).assembler, PromptAssembler)

    def test_default_version_and_count(self) -> None:
        svc = PromptService(storage=InMemoryStorage())
        assert svc.version == "2.0.0"
        assert svc.variation_count == 3
        assert svc.default_limit is None


# ---------------------------------------------------------------------------
# generate()
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_persists_prompt(self, service: PromptService, base_config: PromptConfig) -> None:
        prompt = service.generate(base_config)
        assert prompt.id == 1
        assert service.storage.get_prompt_by_id(1) == prompt

    def test_copies_config_fields(self, service: PromptService, full_config: PromptConfig) -> None:
        prompt = service.generate(full_config)
        assert prompt.category == "Urban & Street"
        assert prompt.style == "Noir"
        assert prompt.duration == "10-15 seconds"
        assert prompt.complexity == "Complex"
        assert prompt.elements == full_config.elements

    def test_metadata(self, service: PromptService, full_config: PromptConfig) -> None:
        metadata = service.generate(full_config).metadata
        assert metadata.version == "2.0.0"
        assert metadata.generated_at
        assert metadata.config_hash == config_hash(full_config)
        assert metadata.enabled_features.shot_details is True
        assert metadata.enabled_features.scene_details is True
        assert metadata.enabled_features.advanced_details is True

    def test_enabled_features_default_false(self, service: PromptService, base_config: PromptConfig) -> None:
        features = service.generate(base_config).metadata.enabled_features
        assert not (features.shot_details or features.scene_details or features.advanced_details)

    def test_custom_version(self, base_config: PromptConfig) -> None:
        svc = PromptService(storage=InMemoryStorage(), version="9.9.9")
        assert svc.generate(base_config).metadata.version == "9.9.9"

    def test_prompt_ends_with_closing(self, service: PromptService, base_config: PromptConfig) -> None:
        assert service.generate(base_config).prompt.endswith("Photorealistic quality with stunning detail.")

    def test_nothing_persisted_when_assembly_fails(self, base_config: PromptConfig) -> None:
        assembler = MagicMock()
        assembler.assemble.side_effect = RuntimeError("boom")
        store = InMemoryStorage()
        svc = PromptService(storage=store, assembler=assembler)
        with pytest.raises(RuntimeError):
            svc.generate(base_config)
        assert store.get_prompts() == []


class TestConfigHash:
    def test_stable_for_equal_configs(self, base_config: PromptConfig) -> None:
        assert config_hash(base_config) == config_hash(base_config.model_copy())

    def test_differs_when_config_changes(self, base_config: PromptConfig) -> None:
        other = base_config.model_copy(update={"style": "Noir"})
        assert config_hash(base_config) != config_hash(other)

    def test_length(self, base_config: PromptConfig) -> None:
        assert len(config_hash(base_config)) == 12


# ---------------------------------------------------------------------------
# variations() / preview() / history
# ---------------------------------------------------------------------------


class TestVariationsAndPreview:
    def test_default_count(self, service: PromptService, base_config: PromptConfig) -> None:
        assert len(service.variations(base_config)) == 3

    def test_explicit_count(self, service: PromptService, base_config: PromptConfig) -> None:
        assert len(service.variations(base_config, 5)) == 5

    def test_zero_count_returns_empty_list(self, service: PromptService, base_config: PromptConfig) -> None:
        assert service.variations(base_config, 0) == []

    def test_configured_count_used_when_omitted(self, base_config: PromptConfig) -> None:
        svc = PromptService(storage=InMemoryStorage(), variation_count=2)
        assert len(svc.variations(base_config)) == 2

    def test_variations_not_persisted(self, service: PromptService, base_config: PromptConfig) -> None:
        service.variations(base_config)
        assert service.storage.get_prompts() == []

    def test_preview_not_persisted(self, service: PromptService, base_config: PromptConfig) -> None:
        assert service.preview(base_config)
        assert service.storage.get_prompts() == []


class TestHistory:
    def test_list_prompts_newest_first(self, service: PromptService, base_config: PromptConfig) -> None:
        first = service.generate(base_config)
        second = service.generate(base_config)
        assert [p.id for p in service.list_prompts()] == [second.id, first.id]

    def test_list_prompts_limit(self, service: PromptService, base_config: PromptConfig) -> None:
        for _ in range(4):
            service.generate(base_config)
        assert len(service.list_prompts(2)) == 2

    def test_default_limit_applies_when_limit_omitted(self, base_config: PromptConfig) -> None:
        svc = PromptService(storage=InMemoryStorage(), default_limit=2)
        for _ in range(4):
            svc.generate(base_config)
        assert [p.id for p in svc.list_prompts()] == [4, 3]
        assert len(svc.list_prompts(3)) == 3

    def test_get_prompt(self, service: PromptService, base_config: PromptConfig) -> None:
        created = service.generate(base_config)
        assert service.get_prompt(created.id) == created

    def test_get_unknown_prompt_raises(self, service: PromptService) -> None:
        with pytest.raises(PromptNotFoundError):
            service.get_prompt(123)
