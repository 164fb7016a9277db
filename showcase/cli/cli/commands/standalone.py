from typing import Annotated

import pydantic
import typer

from showcase.cli.cli.utils.common import load_showcase_settings, run_with_client
from showcase.cli.cli.utils.rich_utils import (
    rich_print_checked_statement,
    rich_print_command_usage,
    rich_print_json,
)
from showcase.client.contact import check_health, submit_contact
from showcase.models.models.contact import ContactMessage
from showcase.version import get_version

ConfigPathOption = Annotated[
    str | None, typer.Option("--CLI-config-path", help="Path to the configuration file")
]


def register_standalone_commands(app: typer.Typer):
    @app.command("version")
    def version_cmd():
        """Show version information"""
        typer.echo(f"Showcase CLI version: {get_version()}")

    @app.command("health")
    def health_cmd(CLI_config_path: ConfigPathOption = None):
        """Check that the backend answers its liveness probe"""
        rich_print_command_usage("health")
        settings = load_showcase_settings(CLI_config_path)
        rich_print_checked_statement(f"Checking {settings.api_base_url} ...", "loading")
        body = run_with_client(settings, check_health)
        rich_print_checked_statement("Backend is reachable", "success")
        if isinstance(body, dict | list):
            rich_print_json("Health response: ", body)

    @app.command("contact")
    def contact_cmd(
        name: Annotated[str, typer.Option("--name")],
        email: Annotated[str, typer.Option("--email")],
        message: Annotated[str, typer.Option("--message")],
        subject: Annotated[str | None, typer.Option("--subject")] = None,
        CLI_config_path: ConfigPathOption = None,
    ):
        """Send a contact-form message"""
        rich_print_command_usage("contact")
        try:
            contact = ContactMessage(name=name, email=email, subject=subject, message=message)
        except pydantic.ValidationError as e:
            for error in e.errors():
                field = ".".join(str(part) for part in error["loc"])
                rich_print_checked_statement(f"{field}: {error['msg']}", "error")
            raise typer.Exit(code=1)

        settings = load_showcase_settings(CLI_config_path)

        async def action(client):
            return await submit_contact(client, contact)

        run_with_client(settings, action)
        rich_print_checked_statement("Message sent successfully!", "success")
