# ABOUTME: Tests for shared JSON document helpers and the store registry
# ABOUTME: Covers error mapping for read/write failures
import json
from pathlib import Path

import pytest

from mcpbridge.config import ConfigPaths
from mcpbridge.errors import ParseError, PermissionDeniedError, WriteError
from mcpbridge.stores import ClaudeStore, OpenCodeStore, get_all_stores, get_store
from mcpbridge.stores.base import path_exists, read_json_file, write_json_file


def _raise_permission(*args, **kwargs):
    raise PermissionError(13, "Permission denied")


class TestReadJsonFile:
    """Tests for read_json_file."""

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing file reads as an empty dict."""
        assert read_json_file(tmp_path / "nope.json") == {}

    def test_valid_file(self, tmp_path: Path):
        """Test reading a valid document."""
        path = tmp_path / "doc.json"
        path.write_text('{"a": 1}')

        assert read_json_file(path) == {"a": 1}

    def test_invalid_json(self, tmp_path: Path):
        """Test that malformed JSON raises ParseError naming the file."""
        path = tmp_path / "doc.json"
        path.write_text("{not json")

        with pytest.raises(ParseError) as exc_info:
            read_json_file(path)
        assert str(path) in str(exc_info.value)

    def test_permission_denied(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test that an OS permission failure maps to PermissionDeniedError."""
        path = tmp_path / "doc.json"
        path.write_text("{}")
        monkeypatch.setattr("mcpbridge.stores.base.open", _raise_permission, raising=False)

        with pytest.raises(PermissionDeniedError):
            read_json_file(path)

    def test_unsearchable_parent(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test a PermissionError from the existence check is mapped."""
        monkeypatch.setattr(Path, "exists", _raise_permission)

        with pytest.raises(PermissionDeniedError, match="Cannot access"):
            read_json_file(tmp_path / "locked" / "doc.json")


class TestPathExists:
    """Tests for path_exists."""

    def test_existing_and_missing(self, tmp_path: Path):
        """Test plain existence checks."""
        present = tmp_path / "a.json"
        present.write_text("{}")

        assert path_exists(present) is True
        assert path_exists(tmp_path / "b.json") is False

    def test_permission_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test PermissionError surfaces as PermissionDeniedError."""
        monkeypatch.setattr(Path, "exists", _raise_permission)

        with pytest.raises(PermissionDeniedError):
            path_exists(tmp_path / "a.json")

    def test_store_load(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test stores report an unsearchable directory as PermissionDeniedError."""
        store = ClaudeStore(config_path=tmp_path / "locked" / ".claude.json")
        monkeypatch.setattr(Path, "exists", _raise_permission)

        with pytest.raises(PermissionDeniedError):
            store.load()


class TestWriteJsonFile:
    """Tests for write_json_file."""

    def test_creates_parents(self, tmp_path: Path):
        """Test that parent directories are created."""
        path = tmp_path / "a" / "b" / "doc.json"

        write_json_file(path, {"x": "ü"})

        assert json.loads(path.read_text(encoding="utf-8")) == {"x": "ü"}
        # Non-ASCII is written as-is, not escaped
        assert "ü" in path.read_text(encoding="utf-8")

    def test_unserializable_value(self, tmp_path: Path):
        """Test that serialization failures raise WriteError and leave no file."""
        path = tmp_path / "doc.json"

        with pytest.raises(WriteError, match="Failed to serialize"):
            write_json_file(path, {"bad": object()})
        assert not path.exists()

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_number(self, tmp_path: Path, value: float):
        """Test NaN and Infinity are refused and nothing is written."""
        path = tmp_path / "doc.json"

        with pytest.raises(WriteError, match="Failed to serialize"):
            write_json_file(path, {"mcp": {"fs": {"timeout": value}}})
        assert not path.exists()

    def test_target_is_directory(self, tmp_path: Path):
        """Test that an OS write failure raises WriteError."""
        path = tmp_path / "doc.json"
        path.mkdir()

        with pytest.raises(WriteError, match="Failed to write"):
            write_json_file(path, {})

    def test_permission_denied(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test that an OS permission failure maps to PermissionDeniedError."""
        monkeypatch.setattr("mcpbridge.stores.base.open", _raise_permission, raising=False)

        with pytest.raises(PermissionDeniedError, match="Cannot write"):
            write_json_file(tmp_path / "doc.json", {})


class TestRegistry:
    """Tests for get_store and get_all_stores."""

    def test_get_store_uses_paths(self, paths: ConfigPaths):
        """Test that stores are bound to the injected paths."""
        opencode = get_store("opencode", paths)
        claude = get_store("claude", paths)

        assert isinstance(opencode, OpenCodeStore)
        assert isinstance(claude, ClaudeStore)
        assert opencode.config_path == paths.opencode_path
        assert claude.config_path == paths.claude_path

    def test_get_store_unknown(self, paths: ConfigPaths):
        """Test that unknown backend ids raise ValueError."""
        with pytest.raises(ValueError, match="Must be 'opencode' or 'claude'"):
            get_store("gemini", paths)

    def test_get_all_stores_order(self, paths: ConfigPaths):
        """Test that OpenCode comes first."""
        stores = get_all_stores(paths)

        assert [s.backend for s in stores] == ["opencode", "claude"]
