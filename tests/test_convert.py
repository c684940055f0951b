# ABOUTME: Tests for OpenCode <-> Claude Code definition conversion
# ABOUTME: Pure functions, no files involved
import pytest

from mcpbridge.convert import claude_to_opencode, convert, opencode_to_claude


class TestOpenCodeToClaude:
    """Tests for opencode_to_claude."""

    def test_local_server(self):
        """Test the documented local server example."""
        config = {
            "type": "local",
            "command": ["npx", "-y", "pkg"],
            "environment": {"K": "v"},
            "enabled": True,
            "description": "d",
        }

        result = opencode_to_claude(config)

        assert result == {
            "command": "npx",
            "args": ["-y", "pkg"],
            "env": {"K": "v"},
            "type": "stdio",
        }

    def test_remote_server(self):
        """Test url and headers are copied and type becomes http."""
        config = {
            "type": "remote",
            "url": "https://api.example.com/mcp",
            "headers": {"Authorization": "Bearer token"},
            "enabled": True,
        }

        result = opencode_to_claude(config)

        assert result == {
            "url": "https://api.example.com/mcp",
            "headers": {"Authorization": "Bearer token"},
            "type": "http",
        }

    def test_single_element_command_has_no_args(self):
        """Test that args is omitted when the command list has one element."""
        result = opencode_to_claude({"command": ["uvx"]})

        assert result == {"command": "uvx", "type": "stdio"}

    def test_empty_command_list(self):
        """Test that an empty command list yields no command but still stdio type."""
        result = opencode_to_claude({"command": []})

        assert "command" not in result
        assert "args" not in result
        assert result["type"] == "stdio"

    def test_string_command_copied(self):
        """Test that a string command is copied as-is."""
        result = opencode_to_claude({"command": "node server.js"})

        assert result["command"] == "node server.js"
        assert "args" not in result

    def test_transport_and_timeout_copied(self):
        """Test the remaining shared fields are carried over verbatim."""
        result = opencode_to_claude(
            {"url": "http://localhost:8080", "transport": "sse", "timeout": 5000}
        )

        assert result["transport"] == "sse"
        assert result["timeout"] == 5000

    def test_url_wins_over_command_for_type(self):
        """Test that url takes precedence when deriving type."""
        result = opencode_to_claude({"url": "http://x", "command": ["npx"]})

        assert result["type"] == "http"

    def test_no_type_without_url_or_command(self):
        """Test that type is omitted when neither url nor command exist."""
        result = opencode_to_claude({"environment": {"A": "1"}})

        assert result == {"env": {"A": "1"}}

    @pytest.mark.parametrize(
        "config",
        [
            {"enabled": False, "description": "x"},
            {"command": ["npx"], "enabled": True},
            {"url": "http://x", "description": "remote"},
        ],
    )
    def test_never_emits_opencode_only_fields(self, config):
        """Test that enabled and description never reach Claude Code."""
        result = opencode_to_claude(config)

        assert "enabled" not in result
        assert "description" not in result
        assert "environment" not in result

    def test_unknown_fields_dropped(self):
        """Test that fields without a Claude Code equivalent are not carried."""
        result = opencode_to_claude({"command": ["npx"], "oauth": {"clientId": "x"}})

        assert "oauth" not in result

    def test_input_not_mutated(self):
        """Test that the input dict and its nested values are left alone."""
        config = {"command": ["npx", "-y"], "environment": {"K": "v"}}

        result = opencode_to_claude(config)
        result["env"]["K"] = "changed"
        result["args"].append("extra")

        assert config == {"command": ["npx", "-y"], "environment": {"K": "v"}}


class TestClaudeToOpenCode:
    """Tests for claude_to_opencode."""

    def test_local_server(self):
        """Test the documented local server example."""
        config = {"command": "npx", "args": ["-y", "pkg"], "env": {"K": "v"}}

        result = claude_to_opencode(config)

        assert result == {
            "type": "local",
            "enabled": True,
            "command": ["npx", "-y", "pkg"],
            "environment": {"K": "v"},
        }

    def test_remote_server(self):
        """Test that a url makes the entry remote."""
        config = {
            "url": "https://api.example.com/mcp",
            "headers": {"Authorization": "Bearer token"},
        }

        result = claude_to_opencode(config)

        assert result == {
            "type": "remote",
            "enabled": True,
            "url": "https://api.example.com/mcp",
            "headers": {"Authorization": "Bearer token"},
        }

    def test_command_without_args(self):
        """Test a bare string command becomes a one-element list."""
        result = claude_to_opencode({"command": "uvx"})

        assert result["command"] == ["uvx"]

    def test_array_command_spread_then_args(self):
        """Test that an array command is spread before args."""
        result = claude_to_opencode({"command": ["npx", "-y"], "args": ["pkg"]})

        assert result["command"] == ["npx", "-y", "pkg"]

    def test_no_command_omitted(self):
        """Test that command is omitted when nothing can be merged."""
        result = claude_to_opencode({"url": "http://x"})

        assert "command" not in result

    @pytest.mark.parametrize("enabled", [False, True, "no", None])
    def test_enabled_always_true(self, enabled):
        """Test that enabled is forced to true whatever the input says."""
        result = claude_to_opencode({"command": "npx", "enabled": enabled})

        assert result["enabled"] is True

    def test_existing_type_is_rederived(self):
        """Test that an incoming type is replaced by the inferred one."""
        assert claude_to_opencode({"type": "stdio", "command": "npx"})["type"] == "local"
        assert claude_to_opencode({"type": "http", "url": "http://x"})["type"] == "remote"
        assert claude_to_opencode({"type": "sse"})["type"] == "local"

    def test_description_transport_timeout_copied(self):
        """Test the fields carried verbatim into OpenCode."""
        result = claude_to_opencode(
            {"url": "http://x", "description": "d", "transport": "sse", "timeout": 10}
        )

        assert result["description"] == "d"
        assert result["transport"] == "sse"
        assert result["timeout"] == 10

    def test_env_renamed(self):
        """Test env becomes environment."""
        result = claude_to_opencode({"command": "npx", "env": {"TOKEN": "abc"}})

        assert result["environment"] == {"TOKEN": "abc"}
        assert "env" not in result


class TestRoundTrip:
    """Tests for conversions in both directions."""

    @pytest.mark.parametrize(
        "command",
        [["npx"], ["npx", "-y", "test-server"], ["uv", "run", "--with", "mcp", "server.py"]],
    )
    def test_command_array_preserved(self, command):
        """Test that a non-empty command array survives opencode -> claude -> opencode."""
        back = claude_to_opencode(opencode_to_claude({"command": command}))

        assert back["command"] == command

    def test_shared_fields_preserved(self):
        """Test every field both backends know survives the round trip."""
        original = {
            "type": "remote",
            "url": "https://example.com/mcp",
            "headers": {"X-Key": "1"},
            "transport": "sse",
            "timeout": 30,
            "environment": {"KEY": "value"},
            "enabled": False,
            "description": "lost on the way",
        }

        back = claude_to_opencode(opencode_to_claude(original))

        for key in ("url", "headers", "transport", "timeout", "environment"):
            assert back[key] == original[key]
        # Lossy by design: enabled is re-derived, description is dropped
        assert back["enabled"] is True
        assert "description" not in back


class TestConvert:
    """Tests for the convert dispatcher."""

    def test_same_backend_returns_copy(self):
        """Test that no conversion happens within one backend."""
        config = {"command": ["npx"], "custom": {"nested": True}}

        result = convert(config, "opencode", "opencode")

        assert result == config
        assert result is not config
        assert result["custom"] is not config["custom"]

    def test_dispatches_to_claude(self):
        """Test opencode -> claude dispatch."""
        assert convert({"command": ["npx", "x"]}, "opencode", "claude") == {
            "command": "npx",
            "args": ["x"],
            "type": "stdio",
        }

    def test_dispatches_to_opencode(self):
        """Test claude -> opencode dispatch."""
        assert convert({"command": "npx"}, "claude", "opencode")["type"] == "local"

    def test_unknown_backend(self):
        """Test unknown backend ids are rejected."""
        with pytest.raises(ValueError, match="Unknown backend 'cursor'"):
            convert({}, "cursor", "claude")
