"""Content generation API endpoint."""

import logfire
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from api.dependencies import ContentService, UserName
from generation.exceptions import InternalGenerationError, InvalidArgumentError
from generation.models import GenerationRequest
from schemas.generation import ErrorResponse, GenerateContentRequest, GenerateContentResponse


router = APIRouter(prefix="/api", tags=["Content Generation"])


@router.post(
    "/generate",
    response_model=GenerateContentResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_content(
    body: GenerateContentRequest,
    user_name: UserName,
    generator: ContentService,
):
    """
    Generate an HTML document for a free-text prompt.

    Args:
        body: Request with the user's prompt
        user_name: Display name from the x-user-name header
        generator: Content generator bound to the app's provider

    Returns:
        GenerateContentResponse: content, source and optional fallback warning

    Errors:
        400: If the prompt is missing or empty
        500: If fallback content could not be generated
    """
    with logfire.span("api.generate_content", has_user_name=bool(user_name)):
        try:
            result = await generator.generate(
                GenerationRequest(prompt=body.prompt or "", user_name=user_name)
            )
        except InvalidArgumentError as e:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": str(e)},
            )
        except InternalGenerationError as e:
            logfire.error("Content generation failed", error=str(e))
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Failed to generate content"},
            )

        logfire.info(
            "Content generated",
            source=result.source.value,
            content_length=len(result.content),
        )

        return GenerateContentResponse(
            content=result.content,
            source=result.source.value,
            error=result.warning,
        )
