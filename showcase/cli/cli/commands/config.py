from typing import Annotated

import typer

from showcase.cli.cli.utils.common import load_showcase_settings
from showcase.cli.cli.utils.rich_utils import (
    rich_print_checked_statement,
    rich_print_command_usage,
    rich_print_json,
)
from showcase.client.token_store import TokenStore
from showcase.models.utils import convert_model_to_dict

app = typer.Typer()

ConfigPathOption = Annotated[
    str | None, typer.Option("--CLI-config-path", help="Path to the configuration file")
]


@app.command("show")
def show_config(CLI_config_path: ConfigPathOption = None):
    """
    Show the effective client configuration (environment, cli.yaml and defaults merged).
    """
    rich_print_command_usage("config show")
    settings = load_showcase_settings(CLI_config_path)
    config = convert_model_to_dict(settings)
    config["token_stored"] = TokenStore(settings.resolved_token_path).get() is not None
    rich_print_json("Current Showcase CLI configuration: ", config)


@app.command("set-token")
def set_token(
    token: Annotated[str, typer.Argument(help="Access token issued by the backend")],
    CLI_config_path: ConfigPathOption = None,
):
    """
    Store the access token used for create, update and delete calls.
    """
    rich_print_command_usage("config set-token")
    settings = load_showcase_settings(CLI_config_path)
    token_store = TokenStore(settings.resolved_token_path)
    try:
        token_store.set(token)
    except ValueError as e:
        rich_print_checked_statement(str(e), "error")
        raise typer.Exit(code=1)
    rich_print_checked_statement(f"Token saved to {token_store.path}", "success")


@app.command("clear-token")
def clear_token(CLI_config_path: ConfigPathOption = None):
    """
    Forget the stored access token.
    """
    rich_print_command_usage("config clear-token")
    settings = load_showcase_settings(CLI_config_path)
    TokenStore(settings.resolved_token_path).clear()
    rich_print_checked_statement("Token cleared", "success")
