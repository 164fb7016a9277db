import os
from pathlib import Path

from showcase.client.client_logging import logger


class TokenStore:
    """
    Persisted auth token, one line in a file readable only by the owner.
    """

    def __init__(self, path: str | Path):
        self.path = Path(os.path.expanduser(str(path)))

    def get(self) -> str | None:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def set(self, token: str) -> None:
        token = token.strip()
        if not token:
            raise ValueError("Token cannot be empty")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token + "\n", encoding="utf-8")
        os.chmod(self.path, 0o600)
        logger.info(f"Token saved to {self.path}")

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            logger.info(f"Token removed from {self.path}")


class MemoryTokenStore(TokenStore):
    """Token held in memory only; used by tests and embedding callers."""

    def __init__(self, token: str | None = None):
        self._token = token
        self.path = Path("<memory>")

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        token = token.strip()
        if not token:
            raise ValueError("Token cannot be empty")
        self._token = token

    def clear(self) -> None:
        self._token = None
