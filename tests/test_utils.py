"""Unit tests for the Rich console helpers (projo.utils)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from projo.utils import (
    confirm,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_tree,
    print_warning,
)


pytestmark = pytest.mark.unit


class TestRichOutputHelpers:
    def test_print_header(self, capsys):
        print_header("Go Project Generator")
        assert "Go Project Generator" in capsys.readouterr().out

    def test_print_summary_table(self, capsys):
        print_summary_table({"Project": "orders", "Files": "7"}, title="Project")
        out = capsys.readouterr().out
        assert "orders" in out
        assert "Files" in out

    def test_print_success(self, capsys):
        print_success("done")
        assert "done" in capsys.readouterr().out

    def test_print_warning(self, capsys):
        print_warning("Generation cancelled")
        assert "Generation cancelled" in capsys.readouterr().out

    def test_print_error_escapes_markup(self, capsys):
        print_error("bad path [bold]x[/bold]")
        out = capsys.readouterr().out
        assert "Error:" in out
        assert "[bold]x[/bold]" in out

    def test_print_tree(self, tmp_path, capsys):
        root = tmp_path / "orders"
        print_tree(root, [root / "cmd", root / "cmd" / "main.go", root / "go.mod"])
        out = capsys.readouterr().out
        assert "main.go" in out
        assert out.count("cmd") == 1


class TestConfirm:
    def test_delegates_to_rich_prompt(self):
        with patch("projo.utils.Confirm.ask", return_value=True) as mock_ask:
            assert confirm("Generate project?") is True
        args, kwargs = mock_ask.call_args
        assert args == ("Generate project?",)
        assert kwargs["default"] is False
