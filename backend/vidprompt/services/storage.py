"""In-memory storage for generated prompts and library templates."""
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import TypeAdapter

from vidprompt.models.prompt import GeneratedPrompt, PromptCreate
from vidprompt.models.template import Template, TemplateCreate, TemplateSeed

logger = logging.getLogger(__name__)

BUNDLED_TEMPLATES_PATH = Path(__file__).resolve().parent.parent / "data" / "templates.json"

_SEED_LIST = TypeAdapter(list[TemplateSeed])


def load_template_seeds(path: Optional[Path] = None) -> list[TemplateSeed]:
    """Load library seed entries from a JSON array file.

    Args:
        path: Seed file; the bundled library is used when None.

    Raises:
        FileNotFoundError: When the file does not exist.
        pydantic.ValidationError: When an entry is malformed.
    """
    seed_path = Path(path) if path is not None else BUNDLED_TEMPLATES_PATH
    seeds = _SEED_LIST.validate_json(seed_path.read_text(encoding="utf-8"))
    logger.info("Loaded %d template seeds from %s", len(seeds), seed_path)
    return seeds


class InMemoryStorage:
    """Two keyed collections with auto-incrementing integer ids starting at 1.

    Instances are owned by the application (one per app) so tests can use a
    fresh store each time. Not thread-safe; the app processes one request at
    a time against it.
    """

    def __init__(self, seeds: Optional[Iterable[TemplateSeed]] = None) -> None:
        self._prompts: dict[int, GeneratedPrompt] = {}
        self._templates: dict[int, Template] = {}
        self._next_prompt_id = 1
        self._next_template_id = 1
        for seed in seeds or ():
            self.create_template(seed)

    # --- Prompts ---

    def create_prompt(self, data: PromptCreate) -> GeneratedPrompt:
        prompt = GeneratedPrompt(
            **data.model_dump(),
            id=self._next_prompt_id,
            created_at=datetime.now(timezone.utc),
        )
        self._prompts[prompt.id] = prompt
        self._next_prompt_id += 1
        return prompt

    def get_prompts(self, limit: Optional[int] = None) -> list[GeneratedPrompt]:
        """Return prompts newest first, capped to ``limit`` when given."""
        prompts = sorted(
            self._prompts.values(),
            key=lambda p: (p.created_at, p.id),
            reverse=True,
        )
        return prompts[:limit] if limit else prompts

    def get_prompt_by_id(self, prompt_id: int) -> Optional[GeneratedPrompt]:
        return self._prompts.get(prompt_id)

    # --- Templates ---

    def create_template(self, data: Union[TemplateCreate, TemplateSeed]) -> Template:
        """Store a template. Plain creations start at zero usage; seeds keep theirs."""
        usage_count = data.usage_count if isinstance(data, TemplateSeed) else 0
        template = Template(
            **data.model_dump(exclude={"usage_count"}),
            usage_count=usage_count,
            id=self._next_template_id,
            created_at=datetime.now(timezone.utc),
        )
        self._templates[template.id] = template
        self._next_template_id += 1
        return template

    def get_templates(self, category: Optional[str] = None) -> list[Template]:
        """Exact category match when given, otherwise all by usage count desc."""
        templates = list(self._templates.values())
        if category:
            return [t for t in templates if t.category == category]
        return sorted(templates, key=lambda t: t.usage_count, reverse=True)

    def get_template_by_id(self, template_id: int) -> Optional[Template]:
        return self._templates.get(template_id)

    def update_template_usage(self, template_id: int) -> Optional[Template]:
        """Increment usage by one. Returns None (and changes nothing) if unknown."""
        template = self._templates.get(template_id)
        if template is None:
            return None
        updated = template.model_copy(update={"usage_count": template.usage_count + 1})
        self._templates[template_id] = updated
        logger.debug("template %d usage_count=%d", template_id, updated.usage_count)
        return updated

    def search_templates(self, query: str) -> list[Template]:
        """Case-insensitive substring match over name, description and category."""
        needle = query.lower()
        return [
            t
            for t in self._templates.values()
            if needle in t.name.lower()
            or needle in t.description.lower()
            or needle in t.category.lower()
        ]
