"""Webhook Daraja: parsing seguro de callbacks."""

from .receive import InvalidJsonError, WebhookRequestError, parse_callback_body

__all__ = [
    "InvalidJsonError",
    "WebhookRequestError",
    "parse_callback_body",
]
