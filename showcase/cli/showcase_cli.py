import typer
from typer.main import get_command

from showcase.cli.cli.commands.config import app as config
from showcase.cli.cli.commands.gallery import app as gallery
from showcase.cli.cli.commands.projects import app as projects
from showcase.cli.cli.commands.standalone import register_standalone_commands
from showcase.cli.cli_logging import setup_logging as setup_cli_logging
from showcase.client.client_logging import setup_logging as setup_client_logging
from showcase.models.logging import setup_logging as setup_models_logging

app = typer.Typer(no_args_is_help=True)

# Register standalone commands (version, health, contact)
register_standalone_commands(app)


@app.callback()
def verbose_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging", is_eager=True
    ),
    verbose_level=typer.Option(
        "INFO",
        "--verbose-level",
        "-vl",
        help="Set verbose logging level",
        is_eager=True,
    ),
):
    """Set up logging for all commands"""
    setup_cli_logging(verbose, verbose_level)
    setup_client_logging(verbose, verbose_level)
    setup_models_logging(verbose, verbose_level)


app.add_typer(config, name="config", help="Configuration and token commands")
app.add_typer(projects, name="projects", help="Manage projects")
app.add_typer(gallery, name="gallery", help="Manage gallery items")
showcasecli = get_command(app)


def main():
    app()
