from typing import Any

from showcase.client.client_logging import logger
from showcase.client.http import HttpClient
from showcase.models.models.contact import ContactMessage
from showcase.models.utils import convert_model_to_dict


async def submit_contact(client: HttpClient, message: ContactMessage) -> Any:
    """
    Post a contact-form message. No credential is needed.
    """
    logger.info(f"Submitting contact message from {message.email}")
    return await client.post(
        "/api/contact", json=convert_model_to_dict(message, exclude_none=True)
    )


async def check_health(client: HttpClient) -> Any:
    """Liveness probe; returns the decoded body of ``GET /api/health``."""
    return await client.get("/api/health")
