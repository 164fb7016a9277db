"""
Generic collection store.

One ``CollectionStore`` owns the in-memory list of one kind of record and
keeps it in sync with the backend. What differs between projects and gallery
items (resource path, record model, which fields are enum-constrained, the
response envelope) lives in an ``EntitySchema``.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic

import pydantic

from showcase.client.client_logging import logger
from showcase.client.errors import (
    NotFoundError,
    ShowcaseError,
    UnknownError,
    ValidationError,
)
from showcase.client.http import HttpClient
from showcase.client.images import validate_image
from showcase.client.retry import RetryPolicy
from showcase.models.models.base import match_enum_member
from showcase.models.models.collections import (
    CollectionState,
    CollectionStatus,
    FetchFilters,
    Pagination,
    RecordPayload,
    RecordT,
)


@dataclass(frozen=True)
class EntitySchema(Generic[RecordT]):
    resource: str
    record_model: type[RecordT]
    label: str
    enum_fields: dict[str, type[Enum]] = field(default_factory=dict)
    required_fields: tuple[str, ...] = ()
    require_image: bool = True
    paginated: bool = False

    def allowed_values(self, field_name: str) -> list[str]:
        return [str(member.value) for member in self.enum_fields[field_name]]

    def canonical(self, field_name: str, value: str) -> str:
        """
        Canonical enum value for ``value``.

        Raises:
            ValidationError: with the list of allowed values.
        """
        try:
            return str(match_enum_member(self.enum_fields[field_name], value).value)
        except ValueError:
            allowed = ", ".join(self.allowed_values(field_name))
            raise ValidationError(f"Invalid {field_name}. Please select one of: {allowed}")

    def validate_payload(self, payload: RecordPayload, partial: bool = False) -> RecordPayload:
        """
        Check a form payload and return a copy with enum fields in canonical form.

        ``partial`` relaxes the required-field and required-image checks for updates,
        and only checks the title when it was given.
        """
        updates: dict[str, Any] = {}
        if not partial or "title" in payload.model_fields_set:
            if not payload.title or not payload.title.strip():
                raise ValidationError("Title is required")
            updates["title"] = payload.title.strip()

        for field_name in self.enum_fields:
            value = getattr(payload, field_name)
            if value is None or not str(value).strip():
                if field_name in self.required_fields and not partial:
                    raise ValidationError(
                        f"{field_name.capitalize()} is required. Please select a {field_name}."
                    )
                continue
            updates[field_name] = self.canonical(field_name, value)

        if payload.image is not None:
            validate_image(payload.image)
        elif self.require_image and not partial:
            raise ValidationError("Image file is required")

        return payload.model_copy(update=updates)

    def validate_filters(self, filters: FetchFilters) -> FetchFilters:
        updates = {}
        for field_name in ("category", "section"):
            value = getattr(filters, field_name)
            if value and field_name in self.enum_fields:
                updates[field_name] = self.canonical(field_name, value)
        return filters.model_copy(update=updates)


def describe_error(error: BaseException, label: str) -> str:
    """User-readable message stored in the ``error`` state."""
    if isinstance(error, NotFoundError):
        return f"{label} not found"
    if isinstance(error, ShowcaseError):
        return error.user_message
    return str(error) or "Request failed"


class CollectionStore(Generic[RecordT]):
    def __init__(
        self,
        client: HttpClient,
        schema: EntitySchema[RecordT],
        retry_policy: RetryPolicy | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.client = client
        self.schema = schema
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep
        self._state: CollectionState[RecordT] = CollectionState()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def state(self) -> CollectionState[RecordT]:
        """Deep copy of the current state; mutating it does not affect the store."""
        return self._state.model_copy(deep=True)

    @property
    def items(self) -> list[RecordT]:
        """Copies of the records; editing them does not touch the store."""
        return [item.model_copy() for item in self._state.items]

    @property
    def status(self) -> CollectionStatus:
        return self._state.status

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def pagination(self) -> Pagination:
        return self._state.pagination.model_copy()

    def get(self, record_id: str) -> RecordT | None:
        record = next((item for item in self._state.items if item.id == record_id), None)
        return record.model_copy() if record is not None else None

    def by_section(self, section: str) -> list[RecordT]:
        if "section" in self.schema.enum_fields:
            section = self.schema.canonical("section", section)
        return [
            item.model_copy()
            for item in self._state.items
            if _enum_text(getattr(item, "section", None)) == section
        ]

    def clear_error(self) -> None:
        self._state.error = None
        if self._state.status == CollectionStatus.ERROR:
            self._state.status = CollectionStatus.IDLE

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def _begin(self) -> None:
        self._state.status = CollectionStatus.LOADING
        self._state.error = None

    def _succeed(self) -> None:
        self._state.status = CollectionStatus.READY

    def _fail(self, error: BaseException) -> None:
        self._state.status = CollectionStatus.ERROR
        self._state.error = describe_error(error, self.schema.label)
        logger.error(f"{self.schema.label} store error: {self._state.error} ({error!r})")

    async def _run(self, operation: Callable[[], Awaitable[Any]]) -> Any:
        """Run a mutation through loading/ready/error, re-raising failures."""
        self._begin()
        try:
            result = await operation()
        except ShowcaseError as e:
            self._fail(e)
            raise
        except (pydantic.ValidationError, ValueError, KeyError, TypeError) as e:
            wrapped = UnknownError(f"Unexpected response: {e}")
            self._fail(wrapped)
            raise wrapped from e
        self._succeed()
        return result

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _parse_record(self, raw: Any) -> RecordT | None:
        if not isinstance(raw, dict):
            logger.warning(f"Skipping {self.schema.label} entry that is not an object: {raw!r}")
            return None
        try:
            record = self.schema.record_model.from_api(raw)
        except pydantic.ValidationError as e:
            logger.warning(f"Skipping invalid {self.schema.label} record {raw.get('_id')}: {e}")
            return None
        record.image_url = self.client.resolver.normalize(record.image_url or record.image)
        return record

    def _parse_collection(self, body: Any) -> tuple[list[RecordT], Pagination]:
        if isinstance(body, list):
            raw_items = body
            pagination = self._state.pagination.model_copy(
                update={"page": 1, "total": len(body), "pages": 1}
            )
        elif isinstance(body, dict):
            if body.get("success") is False:
                raise UnknownError(body.get("message") or "Invalid response format")
            raw_items = body.get("data")
            if not isinstance(raw_items, list):
                raise UnknownError("Invalid response format")
            current = self._state.pagination
            pagination = Pagination(
                page=body.get("page", current.page),
                limit=body.get("limit", current.limit),
                total=body.get("total", len(raw_items)),
                pages=body.get("pages", current.pages),
            )
        else:
            raise UnknownError(f"Invalid {self.schema.label.lower()} data received")

        items = [record for record in map(self._parse_record, raw_items) if record is not None]
        return items, pagination

    def _unwrap_record(self, body: Any) -> RecordT | None:
        if isinstance(body, dict):
            if body.get("success") is False:
                raise UnknownError(body.get("message") or "Request failed")
            if isinstance(body.get("data"), dict):
                body = body["data"]
            if "_id" in body or "id" in body:
                return self._parse_record(body)
        return None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def fetch(self, filters: FetchFilters | None = None) -> list[RecordT]:
        """
        Load the collection, retrying transient failures.

        On terminal failure the list is emptied rather than left stale, the
        error message is stored, and the error is re-raised.
        """
        self._begin()
        try:
            filters = self.schema.validate_filters(filters or FetchFilters())
            params = filters.to_params()
            if self.schema.paginated:
                params.setdefault("page", self._state.pagination.page)
                params.setdefault("limit", self._state.pagination.limit)

            async def attempt():
                return await self.client.get(self.schema.resource, params=params or None)

            body = await self.retry_policy.run(
                attempt, sleep=self._sleep, label=f"GET {self.schema.resource}"
            )
            items, pagination = self._parse_collection(body)
        except ShowcaseError as e:
            self._state.items = []
            self._fail(e)
            raise
        except (pydantic.ValidationError, ValueError, KeyError, TypeError) as e:
            wrapped = UnknownError(f"Unexpected response: {e}")
            self._state.items = []
            self._fail(wrapped)
            raise wrapped from e

        self._state.items = items
        self._state.pagination = pagination
        self._succeed()
        logger.info(f"Fetched {len(items)} {self.schema.label.lower()} record(s)")
        return [item.model_copy() for item in items]

    async def add(self, payload: RecordPayload) -> RecordT | None:
        """
        Create a record with its image, put it at the head of the list, then re-fetch.

        A failing re-fetch does not undo the creation; it is reported through
        the store's error state.
        """

        async def operation():
            checked = self.schema.validate_payload(payload)
            files = None
            if checked.image is not None:
                files = {
                    "image": (
                        checked.image.filename,
                        checked.image.content,
                        checked.image.content_type,
                    )
                }
            body = await self.client.post(
                self.schema.resource,
                data=checked.form_fields(),
                files=files,
                timeout=self.client.config.upload_timeout,
                auth=True,
            )
            return self._unwrap_record(body)

        created = await self._run(operation)
        if created is not None:
            self._state.items.insert(0, created)
            self._state.pagination.total += 1
        logger.info(f"{self.schema.label} created: {created.id if created else '<unknown id>'}")

        try:
            await self.fetch()
        except ShowcaseError as e:
            logger.warning(f"Re-fetch after creating {self.schema.label.lower()} failed: {e!r}")
        return created.model_copy() if created is not None else None

    async def update(self, record_id: str, payload: RecordPayload) -> RecordT | None:
        """
        Send changes for one record and replace it in place.

        A JSON body is used unless the payload carries a replacement image. When
        the backend answers an image replacement without the record, the list is
        re-fetched so the new image URL shows up.
        """

        async def operation():
            checked = self.schema.validate_payload(payload, partial=True)
            path = f"{self.schema.resource}/{record_id}"
            if checked.image is not None:
                body = await self.client.put(
                    path,
                    data=checked.form_fields(only_set=True),
                    files={
                        "image": (
                            checked.image.filename,
                            checked.image.content,
                            checked.image.content_type,
                        )
                    },
                    timeout=self.client.config.upload_timeout,
                    auth=True,
                )
            else:
                body = await self.client.put(path, json=_json_fields(checked), auth=True)
            return checked, self._unwrap_record(body)

        checked, updated = await self._run(operation)
        logger.info(f"{self.schema.label} updated: {record_id}")
        if updated is None and checked.image is not None:
            # The new image URL is only known to the backend.
            try:
                await self.fetch()
            except ShowcaseError as e:
                logger.warning(f"Re-fetch after updating {self.schema.label.lower()} failed: {e!r}")
            return self.get(record_id)

        for index, item in enumerate(self._state.items):
            if item.id == record_id:
                if updated is None:
                    changes = _json_fields(checked)
                    updated = self.schema.record_model.from_api(
                        {**item.model_dump(by_alias=True), **changes}
                    )
                    updated.image_url = item.image_url
                self._state.items[index] = updated
                break
        return updated.model_copy() if updated is not None else None

    async def delete(self, record_id: str) -> None:
        async def operation():
            return await self.client.delete(f"{self.schema.resource}/{record_id}", auth=True)

        await self._run(operation)
        before = len(self._state.items)
        self._state.items = [item for item in self._state.items if item.id != record_id]
        if len(self._state.items) < before:
            self._state.pagination.total = max(self._state.pagination.total - 1, 0)
        logger.info(f"{self.schema.label} deleted: {record_id}")

    async def delete_all(self) -> None:
        async def operation():
            return await self.client.delete(f"{self.schema.resource}/all", auth=True)

        await self._run(operation)
        self._state.items = []
        self._state.pagination = self._state.pagination.model_copy(
            update={"page": 1, "total": 0, "pages": 1}
        )
        logger.info(f"All {self.schema.label.lower()} records deleted")


def _enum_text(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _json_fields(payload: RecordPayload) -> dict[str, Any]:
    fields: dict[str, Any] = payload.form_fields(only_set=True)
    if payload.completed is not None:
        fields["completed"] = payload.completed
    return fields
