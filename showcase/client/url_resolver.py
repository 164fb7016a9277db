from dataclasses import dataclass

PASSTHROUGH_PREFIXES = ("http://", "https://", "data:", "blob:")
UPLOADS_PREFIX = "uploads/"


def strip_upload_prefix(path: str) -> str:
    """Drop leading slashes and any ``uploads/`` prefixes from a stored image path."""
    rest = path.strip().lstrip("/")
    while rest.lower().startswith(UPLOADS_PREFIX):
        rest = rest[len(UPLOADS_PREFIX) :].lstrip("/")
    return rest


def is_absolute(path: str) -> bool:
    return path.strip().lower().startswith(PASSTHROUGH_PREFIXES)


@dataclass(frozen=True)
class UrlResolver:
    """
    Turns stored image paths into fully qualified URLs under the backend origin.

    ``normalize`` is pure and idempotent: absolute and ``data:`` URLs pass
    through untouched, anything else becomes ``<origin>/uploads/<path>``.
    """

    origin: str

    def __post_init__(self):
        object.__setattr__(self, "origin", self.origin.strip().rstrip("/"))

    def normalize(self, path: str | None) -> str | None:
        if path is None or not path.strip():
            return None
        if is_absolute(path):
            return path
        return f"{self.origin}/uploads/{strip_upload_prefix(path)}"

