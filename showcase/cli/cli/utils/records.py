from enum import Enum

from showcase.cli.cli.utils.rich_utils import print_records_table, rich_print_checked_statement
from showcase.client.errors import NotFoundError
from showcase.client.store import CollectionStore
from showcase.models.models.collections import FetchFilters, RecordPayload


async def find_record(store: CollectionStore, record_id: str):
    """
    Fetch the collection page by page until ``record_id`` shows up.

    Raises:
        NotFoundError: when no page holds the record.
    """
    page = 1
    while True:
        await store.fetch(FetchFilters(page=page) if store.schema.paginated else None)
        record = store.get(record_id)
        if record is not None:
            return record
        if not store.schema.paginated or page >= store.pagination.pages:
            raise NotFoundError(f"{store.schema.label} {record_id} not found")
        page += 1


def merge_with_existing(existing, changes: RecordPayload) -> RecordPayload:
    """
    Fill the fields an update command did not set from the record currently on the backend.
    """
    merged = {}
    for name in ("title", "description", "category", "section", "completed", "year"):
        if name in changes.model_fields_set:
            merged[name] = getattr(changes, name)
        elif hasattr(existing, name):
            value = getattr(existing, name)
            merged[name] = value.value if isinstance(value, Enum) else value
    merged["image"] = changes.image
    return RecordPayload(**merged)


def print_store_state(store: CollectionStore, records: list, columns: list[str], title: str) -> None:
    if not records:
        rich_print_checked_statement(f"No {title.lower()} found", "info")
        return
    pagination = store.pagination
    footer = None
    if store.schema.paginated:
        footer = f"Page {pagination.page}/{pagination.pages} - {pagination.total} item(s) in total"
    print_records_table(records, columns, title=title, footer=footer)
