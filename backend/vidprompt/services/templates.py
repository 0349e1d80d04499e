"""TemplateService: the quick-start template library."""
from typing import TYPE_CHECKING, Optional

from vidprompt.core.logging import setup_logging
from vidprompt.models.prompt import Complexity, Duration, Elements, PromptConfig, Style
from vidprompt.models.template import Template, TemplateCreate, TemplateUseResponse

if TYPE_CHECKING:
    from vidprompt.services.storage import InMemoryStorage

logger = setup_logging("templates")


class TemplateNotFoundError(LookupError):
    """Raised when a template id is not in storage."""


def starter_config(template: Template) -> PromptConfig:
    """Build the configuration a template loads into the generator form."""
    return PromptConfig(
        category=template.category,
        style=Style.cinematic.value,
        duration=Duration.medium.value,
        complexity=Complexity.medium.value,
        elements=Elements(
            weather_effects=False,
            dynamic_lighting=True,
            camera_movement=True,
        ),
    )


class TemplateService:
    """Browse, search, add and use library templates."""

    def __init__(self, storage: "InMemoryStorage") -> None:
        self.storage = storage

    def list_templates(self, category: Optional[str] = None) -> list[Template]:
        return self.storage.get_templates(category)

    def search(self, query: str) -> list[Template]:
        """Case-insensitive substring search. No match returns an empty list."""
        return self.storage.search_templates(query)

    def create(self, data: TemplateCreate) -> Template:
        template = self.storage.create_template(data)
        logger.info("created template id=%d name=%s", template.id, template.name)
        return template

    def use(self, template_id: int) -> TemplateUseResponse:
        """Record one use of a template and return its starter config.

        Raises:
            TemplateNotFoundError: Unknown id; storage is left unchanged.
        """
        template = self.storage.update_template_usage(template_id)
        if template is None:
            raise TemplateNotFoundError(f"Template not found: {template_id}")
        logger.debug("template %d usage now %d", template.id, template.usage_count)
        return TemplateUseResponse(
            message="Template usage updated",
            config=starter_config(template),
        )
