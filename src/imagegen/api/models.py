"""Pydantic request and response models for the Image Generator API.

These models define the JSON schema of ``POST /api/generate``.  The route
validates the request body against :class:`GenerateRequest` itself (rather
than letting FastAPI do it) so that failures are reported with the API's own
``{"error": ...}`` payload instead of FastAPI's default 422 response.

Models
------
GenerateRequest
    Payload for ``POST /api/generate`` — the prompt to turn into an image.
GenerateResponse
    Success payload carrying the upstream image URL.
ErrorResponse
    Failure payload for 400 and 500 responses.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

PROMPT_REQUIRED = "Prompt is required"
GENERATION_FAILED = "Failed to generate image"


class GenerateRequest(BaseModel):
    """Request body for the ``POST /api/generate`` endpoint.

    Attributes:
        prompt: Natural-language description of the desired image.  Must be
            a JSON string with at least one non-whitespace character.  The
            text is kept verbatim (no trimming) when building the URL.
    """

    prompt: StrictStr = Field(
        ...,
        description="Text description of the image to generate.",
        examples=["a red fox in snow"],
    )

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(PROMPT_REQUIRED)
        return value


class GenerateResponse(BaseModel):
    """Success body for ``POST /api/generate``.

    Serialised with the camel-case key ``imageUrl`` expected by the frontend.
    """

    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(
        ...,
        alias="imageUrl",
        description="GET-able URL of the generated image on the upstream service.",
    )


class ErrorResponse(BaseModel):
    """Failure body for ``POST /api/generate``."""

    error: str = Field(..., description="Human-readable error message.")
