import time
from collections.abc import Callable
from typing import Any

from showcase.client.client_logging import logger
from showcase.client.errors import ShowcaseError, SubmissionInProgress, ValidationError
from showcase.client.images import generate_preview, validate_image
from showcase.client.store import CollectionStore, describe_error
from showcase.models.models.collections import ImageUpload, RecordPayload

SUCCESS_NOTICE_SECONDS = 3.0
FORM_FIELDS = ("title", "description", "category", "section", "completed", "year")


class Notice:
    """A message that disappears ``ttl`` seconds after it was posted."""

    def __init__(self, message: str, ttl: float = SUCCESS_NOTICE_SECONDS, clock=time.monotonic):
        self.message = message
        self._clock = clock
        self.expires_at = clock() + ttl

    @property
    def active(self) -> bool:
        return self._clock() < self.expires_at


class UploadForm:
    """
    Admin form state for creating or editing one record.

    Holds the field values, the selected image and its preview, the inline
    error, and a single-flight guard so that a second ``submit`` while one is
    in flight is refused without touching the store.
    """

    def __init__(
        self,
        store: CollectionStore,
        record_id: str | None = None,
        initial: RecordPayload | None = None,
        clock: Callable[[], float] = time.monotonic,
        notice_ttl: float = SUCCESS_NOTICE_SECONDS,
    ):
        self.store = store
        self.record_id = record_id
        self._initial = initial or RecordPayload()
        self._clock = clock
        self._notice_ttl = notice_ttl
        self.values: RecordPayload = self._initial.model_copy()
        self.preview: str | None = None
        self.error: str | None = None
        self.submitting = False
        self._notice: Notice | None = None

    @property
    def editing(self) -> bool:
        return self.record_id is not None

    @property
    def success(self) -> str | None:
        if self._notice is not None and self._notice.active:
            return self._notice.message
        self._notice = None
        return None

    def set_field(self, name: str, value: Any) -> None:
        if name not in FORM_FIELDS:
            raise KeyError(f"Unknown form field: {name}")
        self.values = RecordPayload.model_validate(
            {**self.values.model_dump(exclude={"image"}), name: value, "image": self.values.image}
        )
        self.error = None

    async def select_file(self, upload: ImageUpload | None) -> str | None:
        """
        Validate and attach an image, returning its preview.

        A rejected file sets ``error`` and leaves the previous selection as it was.
        """
        if upload is None:
            self.values = self.values.model_copy(update={"image": None})
            self.preview = None
            return None
        try:
            validate_image(upload)
        except ValidationError as e:
            self.error = e.user_message
            logger.info(f"Rejected image {upload.filename}: {e.user_message}")
            return None

        self.preview = await generate_preview(upload)
        self.values = self.values.model_copy(update={"image": upload})
        self.error = None
        return self.preview

    async def submit(self):
        if self.submitting:
            raise SubmissionInProgress()

        self.submitting = True
        self.error = None
        label = self.store.schema.label
        try:
            payload = self.store.schema.validate_payload(self.values, partial=self.editing)
            if self.editing:
                record = await self.store.update(self.record_id, payload)
                message = f"{label} updated successfully!"
            else:
                record = await self.store.add(payload)
                message = f"{label} added successfully!"
        except ShowcaseError as e:
            self.error = describe_error(e, label)
            raise
        finally:
            self.submitting = False

        self.reset()
        self._notice = Notice(message, ttl=self._notice_ttl, clock=self._clock)
        return record

    def reset(self) -> None:
        self.values = self._initial.model_copy()
        self.preview = None
        self.error = None
