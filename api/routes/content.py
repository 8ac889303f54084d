"""Draft and extraction endpoints (simulated content, no external calls)."""

import logfire
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from api.dependencies import UserName
from schemas.content import ContentResponse, DraftRequest, ExtractRequest
from schemas.generation import ErrorResponse
from services.stub_content import build_draft, build_extracted_content


router = APIRouter(prefix="/api", tags=["Content"])


@router.post(
    "/draft",
    response_model=ContentResponse,
    responses={400: {"model": ErrorResponse}},
)
async def draft_final_message(body: DraftRequest, user_name: UserName):
    """Return a simulated final message built around the prompt."""
    if not (body.prompt or "").strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Prompt is required"},
        )

    logfire.info("Draft generated", prompt_length=len(body.prompt))
    return ContentResponse(content=build_draft(body.prompt, user_name))


@router.post(
    "/extract",
    response_model=ContentResponse,
    responses={400: {"model": ErrorResponse}},
)
async def extract_content(body: ExtractRequest):
    """Return simulated extracted content for a URL. Nothing is fetched."""
    if not (body.url or "").strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "URL is required"},
        )

    logfire.info("Simulated content extraction", url=body.url)
    return ContentResponse(content=build_extracted_content(body.url))
