"""Template catalog and editor template API endpoints."""

from typing import List, Optional

import logfire
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from api.dependencies import UserName
from generation.editor_templates import (
    find_editor_template,
    get_default_editor_template,
    list_editor_templates,
    render_editor_template,
)
from generation.models import EditorTemplate
from generation.templates import get_template, list_templates, render_template
from schemas.generation import ErrorResponse
from schemas.template import (
    EditorTemplateDetail,
    EditorTemplateSummary,
    TemplateDetail,
    TemplateSummary,
)


router = APIRouter(prefix="/api/templates", tags=["Templates"])


# ===================================================================
# Editor templates (must precede /{template_id})
# ===================================================================

def _editor_detail(template: EditorTemplate, user_name: Optional[str]) -> EditorTemplateDetail:
    return EditorTemplateDetail(
        value=template.value,
        label=template.label,
        description=template.description,
        content=render_editor_template(template, user_name),
    )


@router.get("/editor", response_model=List[EditorTemplateSummary])
async def list_starter_templates():
    """
    List the editor's starter templates in picker order.

    Returns:
        List[EditorTemplateSummary]: value, label and description of each template
    """
    templates = list_editor_templates()
    logfire.info("Editor templates listed", count=len(templates))

    return [
        EditorTemplateSummary(
            value=template.value,
            label=template.label,
            description=template.description,
        )
        for template in templates
    ]


@router.get("/editor/default", response_model=EditorTemplateDetail)
async def get_default_starter_template(user_name: UserName):
    """Render the document a new editor session starts with."""
    return _editor_detail(get_default_editor_template(), user_name)


@router.get(
    "/editor/{value}",
    response_model=EditorTemplateDetail,
    responses={404: {"model": ErrorResponse}},
)
async def get_starter_template(value: str, user_name: UserName):
    """
    Render one editor template.

    Errors:
        404: If no editor template has this value
    """
    template = find_editor_template(value)
    if template is None:
        logfire.warning("Editor template not found", value=value)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Template not found"},
        )

    return _editor_detail(template, user_name)


# ===================================================================
# Fallback catalog
# ===================================================================

@router.get("/", response_model=List[TemplateSummary])
async def list_catalog_templates():
    """
    List the fallback template catalog in match order.

    Returns:
        List[TemplateSummary]: id, title and trigger keywords of each template
    """
    templates = list_templates()
    logfire.info("Templates listed", count=len(templates))

    return [
        TemplateSummary(id=entry.id, title=entry.title, keywords=list(entry.keywords))
        for entry in templates
    ]


@router.get(
    "/{template_id}",
    response_model=TemplateDetail,
    responses={404: {"model": ErrorResponse}},
)
async def get_catalog_template(template_id: str, user_name: UserName):
    """
    Render one catalog template.

    Args:
        template_id: Catalog id, e.g. "pet-care"
        user_name: Display name from the x-user-name header

    Returns:
        TemplateDetail: Template with [Your Name] replaced when a name is known

    Errors:
        404: If the template id is unknown
    """
    entry = get_template(template_id)
    if entry is None:
        logfire.warning("Template not found", template_id=template_id)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Template not found"},
        )

    return TemplateDetail(
        id=entry.id,
        title=entry.title,
        content=render_template(entry, user_name),
    )
