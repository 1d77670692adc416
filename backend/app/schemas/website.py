"""Request and response schemas for website generation."""

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

DEFAULT_THEME: str = "modern"


class GenerateWebsiteRequest(BaseModel):
    """Request body for POST /generate-website.

    The description may also be sent as "prompt". Presence is checked by the
    service so a missing description maps to a 400, not a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    description: str | None = Field(
        default=None,
        validation_alias=AliasChoices("description", "prompt"),
    )
    theme: str | None = DEFAULT_THEME


class GenerateWebsiteSuccess(BaseModel):
    """Successful generation: the three artifacts as written to disk."""

    status: Literal["success"] = "success"
    message: str
    markup: str
    stylesheet: str
    script: str


class GenerateWebsiteError(BaseModel):
    """Generation failed; message names the failure kind and any excerpt."""

    status: Literal["error"] = "error"
    message: str


GenerateWebsiteResponse = GenerateWebsiteSuccess | GenerateWebsiteError
