"""Template library data models."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vidprompt.models.prompt import PromptConfig


class TemplateCreate(BaseModel):
    """Request model for adding a template to the library.

    Accepts both camelCase (wire format) and snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    prompt_template: str = Field(..., min_length=1)
    is_popular: bool = False
    rating: int = Field(default=50, ge=0, le=50)  # out of 50 (5.0 * 10)


class TemplateSeed(TemplateCreate):
    """Pre-seeded library entry, loaded with its historical usage count."""

    usage_count: int = Field(default=0, ge=0)


class Template(TemplateSeed):
    """Stored template. Usage updates replace the stored copy."""

    model_config = ConfigDict(frozen=True)

    id: int
    created_at: datetime


class TemplateUseResponse(BaseModel):
    """Returned by the "use" action: a starter configuration for the template."""

    message: str
    config: PromptConfig
