"""WebsiteGenerationService: description in, website files out.

Flow per request:
1. Validate the description (ClientInputError, raised to the caller)
2. Build the prompt and call the completion provider once
3. Extract the html/css/js artifacts from the reply
4. Materialize them under the generated websites directory
5. Return a success body, or an error body for any failure in steps 2-4
"""

from pathlib import Path
from typing import Protocol

import structlog

from app.core.exceptions import (
    BlockNotFound,
    ClientInputError,
    InternalError,
    MaterializationError,
    ParseError,
    ProviderFailure,
    WebsiteBuilderError,
)
from app.generation import SYSTEM_INSTRUCTION, build_user_prompt, extract, materialize
from app.schemas.website import (
    DEFAULT_THEME,
    GenerateWebsiteError,
    GenerateWebsiteRequest,
    GenerateWebsiteResponse,
    GenerateWebsiteSuccess,
)

logger = structlog.get_logger(__name__)

SUCCESS_MESSAGE: str = "Website code generated and files created successfully!"


class CompletionClient(Protocol):
    async def complete(self, system: str, user: str) -> str: ...


def error_message(exc: Exception) -> str:
    """Render the user-facing message for a generation failure."""
    if isinstance(exc, BlockNotFound):
        return (
            "AI response format error: JSON block not found in model's output. "
            f"Raw content: {exc.excerpt}..."
        )
    if isinstance(exc, ParseError):
        return f"AI response format error: Could not parse JSON from model. Raw content: {exc.excerpt}..."
    if isinstance(exc, MaterializationError):
        return f"Failed to save generated website: {exc}"
    return f"Error during AI generation: {exc}"


class WebsiteGenerationService:
    """Orchestrates one website generation request.

    Holds no per-request state; safe to share across concurrent requests.
    """

    def __init__(self, client: CompletionClient, output_dir: Path | str):
        self.client = client
        self.output_dir = Path(output_dir)

    async def generate(self, request: GenerateWebsiteRequest) -> GenerateWebsiteResponse:
        """Generate and save a website for the request.

        Raises:
            ClientInputError: description is missing or blank. Raised before
                the provider is called.

        Every other failure is logged and returned as a GenerateWebsiteError.
        """
        description = (request.description or "").strip()
        if not description:
            raise ClientInputError("Description is required.")
        theme = (request.theme or "").strip() or DEFAULT_THEME

        log = logger.bind(theme=theme, description_length=len(description))
        log.info("website_generation_started")

        try:
            raw = await self.client.complete(SYSTEM_INSTRUCTION, build_user_prompt(description, theme))
            artifacts = extract(raw)
            record = await materialize(description, artifacts, self.output_dir)
        except ProviderFailure as exc:
            log.warning("website_generation_provider_failed", error=str(exc), status_code=exc.status_code)
            return GenerateWebsiteError(message=error_message(exc))
        except WebsiteBuilderError as exc:
            log.warning("website_generation_failed", error=str(exc), error_type=type(exc).__name__)
            return GenerateWebsiteError(message=error_message(exc))
        except Exception as exc:
            log.error(
                "website_generation_internal_error",
                error=str(exc),
                error_type=type(exc).__name__,
                exc_info=True,
            )
            return GenerateWebsiteError(message=error_message(InternalError(str(exc))))

        log.info("website_generation_completed", slug=record.slug, files=[p.name for p in record.files])
        return GenerateWebsiteSuccess(
            message=SUCCESS_MESSAGE,
            markup=artifacts.markup,
            stylesheet=artifacts.stylesheet,
            script=artifacts.script,
        )
