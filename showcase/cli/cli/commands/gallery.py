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
from showcase.client.collections import (
    VALID_GALLERY_CATEGORIES,
    VALID_GALLERY_SECTIONS,
    gallery_store,
)
from showcase.models.models.collections import FetchFilters

app = typer.Typer()

GALLERY_COLUMNS = ["id", "title", "category", "section", "year", "image_url"]
CATEGORY_HELP = f"One of: {', '.join(VALID_GALLERY_CATEGORIES)}"
SECTION_HELP = f"One of: {', '.join(VALID_GALLERY_SECTIONS)}"

ConfigPathOption = Annotated[
    str | None, typer.Option("--CLI-config-path", help="Path to the configuration file")
]


@app.command("list")
def list_gallery(
    category: Annotated[str | None, typer.Option("--category", help=CATEGORY_HELP)] = None,
    section: Annotated[str | None, typer.Option("--section", help=SECTION_HELP)] = None,
    year: Annotated[str | None, typer.Option("--year")] = None,
    search: Annotated[str | None, typer.Option("--search", help="Free-text search")] = None,
    page: Annotated[int | None, typer.Option("--page", min=1)] = None,
    limit: Annotated[int | None, typer.Option("--limit", min=1)] = None,
    CLI_config_path: ConfigPathOption = None,
):
    """
    List gallery items, one page at a time.
    """
    rich_print_command_usage("gallery list")
    settings = load_showcase_settings(CLI_config_path)
    filters = FetchFilters(
        category=category, section=section, year=year, search=search, page=page, limit=limit
    )

    async def action(client):
        store = gallery_store(client, retry_policy=build_retry_policy(settings))
        await store.fetch(filters)
        return store

    store = run_with_client(settings, action)
    print_store_state(store, store.items, GALLERY_COLUMNS, title="Gallery")


@app.command("add")
def add_gallery_item(
    title: Annotated[str, typer.Option("--title", help="Item title")],
    image: Annotated[str, typer.Option("--image", help="Path to the image")],
    category: Annotated[str, typer.Option("--category", help=CATEGORY_HELP)],
    section: Annotated[str, typer.Option("--section", help=SECTION_HELP)] = "gallery",
    description: Annotated[str | None, typer.Option("--description")] = None,
    year: Annotated[str | None, typer.Option("--year")] = None,
    CLI_config_path: ConfigPathOption = None,
):
    """
    Upload a new gallery item.
    """
    rich_print_command_usage("gallery add")
    settings = load_showcase_settings(CLI_config_path)
    payload = build_payload(title, description, category, section, None, year, image)

    async def action(client):
        store = gallery_store(client, retry_policy=build_retry_policy(settings))
        return await store.add(payload)

    record = run_with_client(settings, action)
    rich_print_checked_statement(
        f"Gallery item added successfully! ({record.id if record else 'id unknown'})", "success"
    )


@app.command("update")
def update_gallery_item(
    item_id: Annotated[str, typer.Argument(help="Gallery item ID")],
    title: Annotated[str | None, typer.Option("--title")] = None,
    category: Annotated[str | None, typer.Option("--category", help=CATEGORY_HELP)] = None,
    section: Annotated[str | None, typer.Option("--section", help=SECTION_HELP)] = None,
    description: Annotated[str | None, typer.Option("--description")] = None,
    year: Annotated[str | None, typer.Option("--year")] = None,
    image: Annotated[str | None, typer.Option("--image", help="Replacement image")] = None,
    CLI_config_path: ConfigPathOption = None,
):
    """
    Update a gallery item. Options left out keep their current value.
    """
    rich_print_command_usage("gallery update")
    settings = load_showcase_settings(CLI_config_path)
    changes = build_payload(title, description, category, section, None, year, image)

    async def action(client):
        store = gallery_store(client, retry_policy=build_retry_policy(settings))
        existing = await find_record(store, item_id)
        payload = merge_with_existing(existing, changes)
        return await store.update(item_id, payload)

    run_with_client(settings, action)
    rich_print_checked_statement(f"Gallery item {item_id} updated successfully!", "success")


@app.command("delete")
def delete_gallery_item(
    item_id: Annotated[str, typer.Argument(help="Gallery item ID")],
    CLI_config_path: ConfigPathOption = None,
):
    """
    Delete one gallery item.
    """
    rich_print_command_usage("gallery delete")
    settings = load_showcase_settings(CLI_config_path)

    async def action(client):
        await gallery_store(client).delete(item_id)

    run_with_client(settings, action)
    rich_print_checked_statement(f"Gallery item {item_id} deleted successfully!", "success")


@app.command("delete-all")
def delete_all_gallery_items(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt")] = False,
    CLI_config_path: ConfigPathOption = None,
):
    """
    Delete every gallery item. This cannot be undone.
    """
    rich_print_command_usage("gallery delete-all")
    if not yes:
        typer.confirm(
            "Are you sure you want to delete ALL gallery items? This cannot be undone!",
            abort=True,
        )
    settings = load_showcase_settings(CLI_config_path)

    async def action(client):
        await gallery_store(client).delete_all()

    run_with_client(settings, action)
    rich_print_checked_statement("All gallery items deleted successfully!", "success")
