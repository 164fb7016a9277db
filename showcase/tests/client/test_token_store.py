import os
import stat

import pytest

from showcase.client.token_store import MemoryTokenStore, TokenStore


class TestTokenStore:
    def test_missing_file_returns_none(self, tmp_path):
        assert TokenStore(tmp_path / "token").get() is None

    def test_set_get_clear(self, tmp_path):
        store = TokenStore(tmp_path / "nested" / "token")

        store.set("  abc.def  ")

        assert store.get() == "abc.def"
        assert stat.S_IMODE(os.stat(store.path).st_mode) == 0o600

        store.clear()
        assert store.get() is None
        assert not store.path.exists()

    def test_blank_file_returns_none(self, tmp_path):
        path = tmp_path / "token"
        path.write_text("\n")
        assert TokenStore(path).get() is None

    def test_empty_token_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            TokenStore(tmp_path / "token").set("   ")

    def test_clear_missing_file_is_a_no_op(self, tmp_path):
        TokenStore(tmp_path / "token").clear()


class TestMemoryTokenStore:
    def test_round_trip(self):
        store = MemoryTokenStore()
        assert store.get() is None
        store.set("xyz")
        assert store.get() == "xyz"
        store.clear()
        assert store.get() is None
