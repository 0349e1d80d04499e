"""Template library API router."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from vidprompt.models.template import Template, TemplateCreate, TemplateUseResponse
from vidprompt.services.templates import TemplateNotFoundError, TemplateService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/templates", tags=["templates"])


def get_template_service(request: Request) -> TemplateService:
    """FastAPI dependency: retrieve TemplateService from app.state."""
    svc: TemplateService | None = getattr(request.app.state, "template_service", None)
    if svc is None:
        raise HTTPException(
            status_code=503,
            detail="Template service unavailable. Service not initialized.",
        )
    return svc


@router.get("", response_model=list[Template])
async def list_templates(
    category: Optional[str] = None,
    service: TemplateService = Depends(get_template_service),
) -> list[Template]:
    """List templates, filtered by exact category or sorted by usage count."""
    try:
        return service.list_templates(category)
    except Exception as exc:
        logger.error(
            "list_templates failed",
            exc_info=True,
            extra={"service": "TemplateRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail="Failed to fetch templates") from exc


@router.get("/search", response_model=list[Template])
async def search_templates(
    q: Optional[str] = None,
    service: TemplateService = Depends(get_template_service),
) -> list[Template]:
    """Search templates by name, description or category.

    Raises:
        HTTPException 400: Missing or blank query.
        HTTPException 500: Unexpected storage failure.
    """
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    try:
        return service.search(q)
    except Exception as exc:
        logger.error(
            "search_templates failed",
            exc_info=True,
            extra={"service": "TemplateRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail="Failed to search templates") from exc


@router.post("", response_model=Template, status_code=status.HTTP_201_CREATED)
async def create_template(
    body: TemplateCreate,
    service: TemplateService = Depends(get_template_service),
) -> Template:
    try:
        return service.create(body)
    except Exception as exc:
        logger.error(
            "create_template failed",
            exc_info=True,
            extra={"service": "TemplateRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail="Failed to create template") from exc


@router.post("/{template_id}/use", response_model=TemplateUseResponse)
async def use_template(
    template_id: int,
    service: TemplateService = Depends(get_template_service),
) -> TemplateUseResponse:
    """Record a template use and return its starter configuration."""
    try:
        return service.use(template_id)
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail="Template not found")
    except Exception as exc:
        logger.error(
            "use_template failed",
            exc_info=True,
            extra={"service": "TemplateRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail="Failed to update template usage") from exc
