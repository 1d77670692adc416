"""Website generation route."""

from fastapi import APIRouter, Depends, Request

from app.schemas.website import (
    GenerateWebsiteError,
    GenerateWebsiteRequest,
    GenerateWebsiteSuccess,
)
from app.services.website_service import WebsiteGenerationService

router = APIRouter()


def get_website_service(request: Request) -> WebsiteGenerationService:
    """Return the service built by create_app for this application."""
    return request.app.state.website_service


@router.post("/generate-website", response_model=GenerateWebsiteSuccess | GenerateWebsiteError)
async def generate_website(
    body: GenerateWebsiteRequest | None = None,
    service: WebsiteGenerationService = Depends(get_website_service),
):
    """Generate a website from a description and theme.

    Returns 200 with status "success" or "error". A missing description is
    rejected with 400 by the ClientInputError handler, as is a
    missing or non-JSON body.
    """
    return await service.generate(body or GenerateWebsiteRequest())
