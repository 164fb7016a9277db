from typing import Annotated

import typer

from showcase.cli.cli.utils.common import (
    build_payload,
    build_retry_policy,
    load_showcase_settings,
    run_with_client,
)
from showcase.cli.cli.utils.records import (
    find_record,
    merge_with_existing,
    print_store_state,
)
from showcase.cli.cli.utils.rich_utils import (
    rich_print_checked_statement,
    rich_print_command_usage,
)
from showcase.client.collections import VALID_PROJECT_SECTIONS, projects_store

app = typer.Typer()

PROJECT_COLUMNS = ["id", "title", "category", "section", "completed", "year", "image_url"]
SECTION_HELP = f"One of: {', '.join(VALID_PROJECT_SECTIONS)}"

ConfigPathOption = Annotated[
    str | None, typer.Option("--CLI-config-path", help="Path to the configuration file")
]


@app.command("list")
def list_projects(
    section: Annotated[
        str | None, typer.Option("--section", help=SECTION_HELP)
    ] = None,
    CLI_config_path: ConfigPathOption = None,
):
    """
    List projects stored on the backend.
    """
    rich_print_command_usage("projects list")
    settings = load_showcase_settings(CLI_config_path)

    async def action(client):
        store = projects_store(client, retry_policy=build_retry_policy(settings))
        await store.fetch()
        records = store.by_section(section) if section else store.items
        return store, records

    store, records = run_with_client(settings, action)
    print_store_state(store, records, PROJECT_COLUMNS, title="Projects")


@app.command("add")
def add_project(
    title: Annotated[str, typer.Option("--title", help="Project title")],
    image: Annotated[str, typer.Option("--image", help="Path to the project image")],
    category: Annotated[str | None, typer.Option("--category", help="Free-text category")] = None,
    section: Annotated[str | None, typer.Option("--section", help=SECTION_HELP)] = None,
    description: Annotated[str | None, typer.Option("--description")] = None,
    completed: Annotated[bool, typer.Option("--completed/--in-progress")] = False,
    year: Annotated[str | None, typer.Option("--year")] = None,
    CLI_config_path: ConfigPathOption = None,
):
    """
    Create a project with its image.
    """
    rich_print_command_usage("projects add")
    settings = load_showcase_settings(CLI_config_path)
    payload = build_payload(title, description, category, section, completed, year, image)

    async def action(client):
        store = projects_store(client, retry_policy=build_retry_policy(settings))
        return await store.add(payload)

    record = run_with_client(settings, action)
    rich_print_checked_statement(
        f"Project added successfully! ({record.id if record else 'id unknown'})", "success"
    )


@app.command("update")
def update_project(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    title: Annotated[str | None, typer.Option("--title")] = None,
    category: Annotated[str | None, typer.Option("--category")] = None,
    section: Annotated[str | None, typer.Option("--section", help=SECTION_HELP)] = None,
    description: Annotated[str | None, typer.Option("--description")] = None,
    completed: Annotated[bool | None, typer.Option("--completed/--in-progress")] = None,
    year: Annotated[str | None, typer.Option("--year")] = None,
    image: Annotated[str | None, typer.Option("--image", help="Replacement image")] = None,
    CLI_config_path: ConfigPathOption = None,
):
    """
    Update a project. Options left out keep their current value.
    """
    rich_print_command_usage("projects update")
    settings = load_showcase_settings(CLI_config_path)
    changes = build_payload(title, description, category, section, completed, year, image)

    async def action(client):
        store = projects_store(client, retry_policy=build_retry_policy(settings))
        existing = await find_record(store, project_id)
        payload = merge_with_existing(existing, changes)
        return await store.update(project_id, payload)

    run_with_client(settings, action)
    rich_print_checked_statement(f"Project {project_id} updated successfully!", "success")


@app.command("delete")
def delete_project(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    CLI_config_path: ConfigPathOption = None,
):
    """
    Delete one project.
    """
    rich_print_command_usage("projects delete")
    settings = load_showcase_settings(CLI_config_path)

    async def action(client):
        await projects_store(client).delete(project_id)

    run_with_client(settings, action)
    rich_print_checked_statement(f"Project {project_id} deleted successfully!", "success")


@app.command("delete-all")
def delete_all_projects(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt")] = False,
    CLI_config_path: ConfigPathOption = None,
):
    """
    Delete every project. This cannot be undone.
    """
    rich_print_command_usage("projects delete-all")
    if not yes:
        typer.confirm(
            "Are you sure you want to delete ALL projects? This cannot be undone!", abort=True
        )
    settings = load_showcase_settings(CLI_config_path)

    async def action(client):
        await projects_store(client).delete_all()

    run_with_client(settings, action)
    rich_print_checked_statement("All projects deleted successfully!", "success")
