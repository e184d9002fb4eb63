"""User profile model (automation settings)"""
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, HttpUrl, field_validator


class Profile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    display_name: Optional[str] = None
    zapier_webhook_url: Optional[str] = None


class WebhookSettingsUpdate(BaseModel):
    """Request body for saving the automation webhook URL"""
    webhook_url: HttpUrl


class WebhookSettings(BaseModel):
    configured: bool
    masked_url: Optional[str] = None


def mask_webhook_url(url: Optional[str]) -> Optional[str]:
    """Hide the secret path part of a webhook URL for display"""
    if not url:
        return None
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.hostname:
        return "Invalid URL"
    return f"{parsed.scheme}://{parsed.hostname}/..."


class PasswordUpdate(BaseModel):
    """Request body for changing the current user's password"""
    password: str
    confirm_password: str

    @field_validator("password")
    @classmethod
    def check_length(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError("Password must be at least 6 characters")
        return value

    @field_validator("confirm_password")
    @classmethod
    def check_match(cls, value: str, info) -> str:
        if "password" in info.data and value != info.data["password"]:
            raise ValueError("Passwords do not match")
        return value
