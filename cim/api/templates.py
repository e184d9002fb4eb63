from typing import List, Optional

from fastapi import APIRouter, Depends

from cim.api.deps import Result, find_or_404, get_workspace, respond
from cim.models import ContentTemplate, ContentTemplateCreate, ContentTemplateUpdate
from cim.services.workspace import IdeaWorkspace

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("", response_model=Result[List[ContentTemplate]])
async def list_templates(
    content_type_id: Optional[str] = None,
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    templates = await workspace.templates.ensure_loaded()
    if content_type_id is not None:
        templates = workspace.templates.for_content_type(content_type_id)
    return respond(workspace, templates)


@router.post("", response_model=Result[Optional[ContentTemplate]])
async def create_template(data: ContentTemplateCreate, workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.templates.create(data))


@router.patch("/{template_id}", response_model=Result[Optional[ContentTemplate]])
async def update_template(
    template_id: str,
    data: ContentTemplateUpdate,
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    await find_or_404(workspace.templates, template_id, "Template not found")
    return respond(workspace, await workspace.templates.update(template_id, data))


@router.delete("/{template_id}", response_model=Result[bool])
async def delete_template(template_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.templates, template_id, "Template not found")
    return respond(workspace, await workspace.templates.delete(template_id))
