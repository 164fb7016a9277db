import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import typer

from showcase.cli.cli.utils.rich_utils import rich_print_checked_statement
from showcase.cli.cli_logging import logger
from showcase.client.errors import ShowcaseError
from showcase.client.http import HttpClient
from showcase.client.images import load_image
from showcase.client.retry import RetryPolicy
from showcase.client.settings import ClientSettings, load_settings
from showcase.client.token_store import TokenStore
from showcase.models.models.collections import RecordPayload

T = TypeVar("T")


def load_showcase_settings(yaml_config_path: str | None = None) -> ClientSettings:
    """
    Load the client settings, exiting with an error message on a bad config file.
    """
    try:
        settings = load_settings(yaml_config_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Unable to load configuration: {e}")
        rich_print_checked_statement(f"Unable to load configuration - {e}", "error")
        raise typer.Exit(code=1)
    logger.info(f"Settings loaded: {settings}")
    return settings


def build_client(settings: ClientSettings) -> HttpClient:
    return HttpClient(settings.client_config, token_store=TokenStore(settings.resolved_token_path))


def build_retry_policy(settings: ClientSettings) -> RetryPolicy:
    return RetryPolicy(retries=settings.fetch_retries, delay=settings.fetch_retry_delay)


def run_with_client(
    settings: ClientSettings, action: Callable[[HttpClient], Awaitable[T]]
) -> T:
    """
    Run ``action`` against a fresh client, turning client errors into exit code 1.
    """

    async def runner() -> T:
        async with build_client(settings) as client:
            return await action(client)

    try:
        return asyncio.run(runner())
    except ShowcaseError as e:
        logger.error(f"Command failed: {e!r}")
        rich_print_checked_statement(e.user_message, "error")
        raise typer.Exit(code=1)


def build_payload(
    title: str | None,
    description: str | None,
    category: str | None,
    section: str | None,
    completed: bool | None,
    year: str | None,
    image_path: str | None,
) -> RecordPayload:
    """
    Assemble a form payload from command options, reading the image file if given.

    Options left as ``None`` stay out of ``model_fields_set``.
    """
    options = {
        "title": title,
        "description": description,
        "category": category,
        "section": section,
        "completed": completed,
        "year": year,
    }
    values: dict[str, Any] = {key: value for key, value in options.items() if value is not None}
    if image_path:
        try:
            values["image"] = load_image(image_path)
        except ShowcaseError as e:
            rich_print_checked_statement(e.user_message, "error")
            raise typer.Exit(code=1)
    return RecordPayload(**values)
