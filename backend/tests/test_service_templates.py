"""Tests for TemplateService."""
import pytest

from vidprompt.models.template import TemplateCreate
from vidprompt.services.storage import InMemoryStorage, load_template_seeds
from vidprompt.services.templates import TemplateNotFoundError, TemplateService, starter_config


@pytest.fixture
def service() -> TemplateService:
    return TemplateService(storage=InMemoryStorage(seeds=load_template_seeds()))


class TestListAndSearch:
    def test_list_all(self, service: TemplateService) -> None:
        templates = service.list_templates()
        assert len(templates) == 6
        assert templates[0].name == "Epic Sports Action"

    def test_list_by_category(self, service: TemplateService) -> None:
        assert [t.name for t in service.list_templates("Vehicle Action")] == ["Vehicle Stunts"]

    def test_search(self, service: TemplateService) -> None:
        assert [t.name for t in service.search("chase")] == ["Urban Chase Scene"]

    def test_search_no_match(self, service: TemplateService) -> None:
        assert service.search("no-such-template") == []


class TestCreate:
    def test_create_adds_to_library(self, service: TemplateService) -> None:
        template = service.create(
            TemplateCreate(
                name="Kitchen Rush",
                description="Busy restaurant service",
                category="Human Drama",
                prompt_template="A {chef} plates {dish}.",
            )
        )
        assert template.usage_count == 0
        assert template in service.list_templates("Human Drama")


class TestUse:
    def test_use_increments_usage(self, service: TemplateService) -> None:
        before = service.storage.get_template_by_id(2).usage_count
        service.use(2)
        assert service.storage.get_template_by_id(2).usage_count == before + 1

    def test_use_returns_starter_config(self, service: TemplateService) -> None:
        result = service.use(3)
        assert result.message == "Template usage updated"
        assert result.config.category == "Nature & Wildlife"
        assert result.config.style == "Cinematic"
        assert result.config.duration == "5-10 seconds"
        assert result.config.complexity == "Medium"

    def test_use_unknown_raises(self, service: TemplateService) -> None:
        with pytest.raises(TemplateNotFoundError):
            service.use(999)


def test_starter_config_effects() -> None:
    template = TemplateService(storage=InMemoryStorage(seeds=load_template_seeds())).storage.get_template_by_id(1)
    config = starter_config(template)
    assert config.elements.weather_effects is False
    assert config.elements.dynamic_lighting is True
    assert config.elements.camera_movement is True
    assert config.enable_shot_details is False
