from fastapi import APIRouter, Depends

from cim.api.deps import Result, get_workspace, respond
from cim.models import PasswordUpdate, WebhookSettings, WebhookSettingsUpdate
from cim.services.workspace import IdeaWorkspace

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("/webhook", response_model=Result[WebhookSettings])
async def get_webhook(workspace: IdeaWorkspace = Depends(get_workspace)):
    """Automation webhook status; the URL is masked"""
    return respond(workspace, await workspace.settings.webhook())


@router.put("/webhook", response_model=Result[WebhookSettings])
async def save_webhook(data: WebhookSettingsUpdate, workspace: IdeaWorkspace = Depends(get_workspace)):
    await workspace.settings.save_webhook(str(data.webhook_url))
    return respond(workspace, await workspace.settings.webhook())


@router.delete("/webhook", response_model=Result[WebhookSettings])
async def clear_webhook(workspace: IdeaWorkspace = Depends(get_workspace)):
    await workspace.settings.clear_webhook()
    return respond(workspace, await workspace.settings.webhook())


@router.post("/password", response_model=Result[bool])
async def update_password(data: PasswordUpdate, workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.settings.update_password(data.password))
