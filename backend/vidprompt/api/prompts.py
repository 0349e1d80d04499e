"""Prompt API router: generation, variations, preview and history."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from vidprompt.models.prompt import (
    GeneratedPrompt,
    PreviewResponse,
    PromptConfig,
    VariationsResponse,
)
from vidprompt.services.prompts import PromptNotFoundError, PromptService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


def get_prompt_service(request: Request) -> PromptService:
    """FastAPI dependency: retrieve PromptService from app.state.

    Returns HTTP 503 if the service was not initialized at startup.
    """
    svc: PromptService | None = getattr(request.app.state, "prompt_service", None)
    if svc is None:
        raise HTTPException(
            status_code=503,
            detail="Prompt service unavailable. Service not initialized.",
        )
    return svc


@router.post("/generate", response_model=GeneratedPrompt)
async def generate_prompt(
    config: PromptConfig,
    service: PromptService = Depends(get_prompt_service),
) -> GeneratedPrompt:
    """Generate a prompt from the configuration and store it.

    Raises:
        HTTPException 400: Invalid configuration (validation handler).
        HTTPException 500: Unexpected generation failure.
    """
    try:
        return service.generate(config)
    except Exception as exc:
        logger.error(
            "generate_prompt failed",
            exc_info=True,
            extra={"service": "PromptRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail="Failed to generate prompt") from exc


@router.post("/variations", response_model=VariationsResponse)
async def generate_variations(
    config: PromptConfig,
    count: Optional[int] = Query(default=None, ge=1, le=10),
    service: PromptService = Depends(get_prompt_service),
) -> VariationsResponse:
    """Generate re-rolled variations of the configuration (not stored)."""
    try:
        return VariationsResponse(variations=service.variations(config, count))
    except Exception as exc:
        logger.error(
            "generate_variations failed",
            exc_info=True,
            extra={"service": "PromptRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail="Failed to generate variations") from exc


@router.post("/preview", response_model=PreviewResponse)
async def preview_prompt(
    config: PromptConfig,
    service: PromptService = Depends(get_prompt_service),
) -> PreviewResponse:
    """Deterministic preview of the prompt the configuration produces."""
    try:
        return PreviewResponse(prompt=service.preview(config))
    except Exception as exc:
        logger.error(
            "preview_prompt failed",
            exc_info=True,
            extra={"service": "PromptRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail="Failed to preview prompt") from exc


@router.get("", response_model=list[GeneratedPrompt])
async def list_prompts(
    limit: Optional[int] = Query(default=None, ge=1),
    service: PromptService = Depends(get_prompt_service),
) -> list[GeneratedPrompt]:
    """Return stored prompts, newest first.

    Args:
        limit: Maximum number of prompts to return. Uses the configured
            default (all prompts when unset) when omitted.
    """
    try:
        return service.list_prompts(limit)
    except Exception as exc:
        logger.error(
            "list_prompts failed",
            exc_info=True,
            extra={"service": "PromptRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail="Failed to fetch prompts") from exc


@router.get("/{prompt_id}", response_model=GeneratedPrompt)
async def get_prompt(
    prompt_id: int,
    service: PromptService = Depends(get_prompt_service),
) -> GeneratedPrompt:
    try:
        return service.get_prompt(prompt_id)
    except PromptNotFoundError:
        raise HTTPException(status_code=404, detail="Prompt not found")
    except Exception as exc:
        logger.error(
            "get_prompt failed",
            exc_info=True,
            extra={"service": "PromptRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail="Failed to fetch prompt") from exc
