"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from vidprompt.api.errors import register_exception_handlers
from vidprompt.api.prompts import router as prompts_router
from vidprompt.api.templates import router as templates_router
from vidprompt.core.config import get_settings
from vidprompt.core.logging import setup_logging
from vidprompt.models.prompt import PromptOptions
from vidprompt.services.storage import InMemoryStorage

# Setup logging
logger = setup_logging("main")


def create_app(storage: Optional[InMemoryStorage] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        storage: Storage adapter to use. When None, a fresh in-memory store
            seeded from the template library is created at startup.

    Returns:
        The FastAPI application.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Initialize services at startup."""
        from vidprompt.services.prompts import PromptService
        from vidprompt.services.storage import load_template_seeds
        from vidprompt.services.templates import TemplateService

        try:
            store = storage
            if store is None:
                store = InMemoryStorage(seeds=load_template_seeds(settings.templates_file))
            app.state.storage = store
            app.state.prompt_service = PromptService(
                storage=store,
                version=settings.prompt_version,
                variation_count=settings.variation_count,
                default_limit=settings.default_prompt_limit,
            )
            app.state.template_service = TemplateService(storage=store)
            logger.info("Services initialized successfully")
        except Exception as exc:
            logger.error(
                "Service initialization failed: running in degraded mode",
                exc_info=True,
                extra={"service": "main", "error_type": type(exc).__name__},
            )
            # Continue without services; endpoints return 503 until fixed

        yield
        # In-memory state is discarded with the process

    app = FastAPI(
        title="Video Prompt Generator",
        description="Structured prompt builder for text-to-video models",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[f"http://localhost:{settings.frontend_port}"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(prompts_router)
    app.include_router(templates_router)

    @app.get("/api/options", response_model=PromptOptions)
    async def get_options() -> PromptOptions:
        """Known categories, styles, durations and complexities for the form.

        Other values are still accepted by the generator and fall back to
        default content.
        """
        return PromptOptions()

    @app.get("/health")
    async def health_check(request: Request) -> dict:
        """Health check endpoint.

        Always returns HTTP 200; check `services.storage` for actual status.
        """
        store = getattr(request.app.state, "storage", None)

        logger.info("Health check requested")
        return {
            "status": "ok",
            "version": app.version,
            "services": {
                "storage": "ok" if store is not None else "unavailable",
            },
        }

    return app


app = create_app()
