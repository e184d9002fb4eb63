"""Outbound automation module"""
from .events import AutomationEvent, WebhookEnvelope
from .webhook import NullWebhookSink, WebhookSink, ZapierWebhookSink, is_valid_webhook_url

__all__ = [
    "AutomationEvent",
    "WebhookEnvelope",
    "WebhookSink",
    "NullWebhookSink",
    "ZapierWebhookSink",
    "is_valid_webhook_url",
]
