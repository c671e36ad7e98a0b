"""
Unit Tests for CLI Commands

Tests the CLI entry points against the built-in seed collection.
Dispatch tests mock the subcommands to verify orchestration only.

PATTERNS:
---------
1. Patch sys.argv per command
2. Verify exit codes
3. Check printed output with capsys
"""

import json

import pytest
from unittest.mock import patch

from medibot.schemas import ChatResponse, ResponseSection, SafetyNote


# ---------------------------------------------------------------------------
# LOAD_ENV TESTS
# ---------------------------------------------------------------------------


class TestLoadEnv:
    """Test environment loading."""

    def test_load_env_does_not_raise(self):
        from medibot.cli.commands import _load_env

        _load_env()


# ---------------------------------------------------------------------------
# MAIN CLI DISPATCH TESTS
# ---------------------------------------------------------------------------


class TestMainCliDispatch:
    """Test main CLI dispatches to correct handlers."""

    @pytest.mark.parametrize(
        "command,handler",
        [
            ("ask", "run_ask_cli"),
            ("search", "run_search_cli"),
            ("chat", "run_chat_cli"),
            ("eval", "run_eval_cli"),
        ],
    )
    def test_main_dispatches(self, command, handler):
        from medibot.cli import commands

        with patch.object(commands, handler) as mock_handler:
            mock_handler.return_value = 0
            with patch("sys.argv", ["medibot", command]):
                result = commands.main()

            mock_handler.assert_called_once()
            assert result == 0

    def test_main_forwards_remaining_args(self):
        from medibot.cli import commands

        seen = {}

        def capture():
            import sys
            seen["argv"] = list(sys.argv)
            return 0

        with patch.object(commands, "run_search_cli", side_effect=capture):
            with patch("sys.argv", ["medibot", "search", "fever", "--top-k", "2"]):
                commands.main()

        assert seen["argv"][1:] == ["fever", "--top-k", "2"]

    def test_main_handles_keyboard_interrupt(self):
        from medibot.cli import commands

        with patch.object(commands, "run_ask_cli") as mock_ask:
            mock_ask.side_effect = KeyboardInterrupt()
            with patch("sys.argv", ["medibot", "ask"]):
                result = commands.main()

            assert result == 130


# ---------------------------------------------------------------------------
# SUBCOMMAND TESTS
# ---------------------------------------------------------------------------


class TestSearchCli:
    """Test ranked search output."""

    def test_search_prints_ranked_conditions(self, capsys):
        from medibot.cli.commands import run_search_cli

        with patch("sys.argv", ["medibot", "wheezing", "chest", "tightness"]):
            result = run_search_cli()

        out = capsys.readouterr().out
        assert result == 0
        assert out.startswith("1. Asthma")

    def test_search_no_results(self, capsys):
        from medibot.cli.commands import run_search_cli

        with patch("sys.argv", ["medibot", "xyzzyplugh"]):
            result = run_search_cli()

        assert result == 0
        assert "No relevant conditions found." in capsys.readouterr().out

    def test_search_bad_dataset(self, tmp_path, capsys):
        from medibot.cli.commands import run_search_cli

        with patch("sys.argv", ["medibot", "fever", "--dataset", str(tmp_path / "nope.json")]):
            result = run_search_cli()

        assert result == 1
        assert "Dataset load failed" in capsys.readouterr().err


class TestAskCli:
    """Test single-question answers."""

    def test_ask_json(self, capsys):
        from medibot.cli.commands import run_ask_cli

        with patch("sys.argv", ["medibot", "What", "is", "asthma?", "--json"]):
            result = run_ask_cli()

        payload = json.loads(capsys.readouterr().out)
        assert result == 0
        assert payload["source"] == "local"
        assert payload["title"] == "Asthma"

    def test_ask_fallback_text(self, capsys):
        from medibot.cli.commands import run_ask_cli

        with patch("sys.argv", ["medibot", "xyzzyplugh"]):
            result = run_ask_cli()

        assert result == 0
        assert "don't have enough data" in capsys.readouterr().out

    def test_ask_with_dataset(self, tmp_path, capsys):
        from medibot.cli.commands import run_ask_cli

        path = tmp_path / "medical_data.json"
        path.write_text(json.dumps([
            {"disease_name": "Flu", "symptoms": ["fever"], "causes": ["virus"],
             "diagnosis": "exam", "treatment": ["rest"]},
            {"disease_name": "Cold", "symptoms": ["sneezing"], "causes": ["rhinovirus"],
             "diagnosis": "exam", "treatment": ["fluids"]},
        ]), encoding="utf-8")

        with patch("sys.argv", ["medibot", "what", "is", "fever", "--dataset", str(path), "--json"]):
            result = run_ask_cli()

        assert result == 0
        assert json.loads(capsys.readouterr().out)["title"] == "Flu"

    def test_ask_rejects_zero_top_k_from_env(self, monkeypatch, capsys):
        from medibot.cli.commands import run_ask_cli

        monkeypatch.setenv("MEDIBOT_TOP_K", "0")
        with patch("sys.argv", ["medibot", "fever"]):
            result = run_ask_cli()

        assert result == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_ask_rejects_zero_top_k_flag(self, capsys):
        from medibot.cli.commands import run_ask_cli

        with patch("sys.argv", ["medibot", "fever", "--top-k", "0"]):
            result = run_ask_cli()

        assert result == 1
        assert "top_k must be at least 1" in capsys.readouterr().err


class TestConfigure:
    """Test command-line overrides of the environment config."""

    def test_top_k_flag_overrides_env(self, monkeypatch):
        import argparse

        from medibot.cli.commands import _configure

        monkeypatch.setenv("MEDIBOT_TOP_K", "5")
        args = argparse.Namespace(dataset=None, top_k=1, verbose=False)

        assert _configure(args).top_k == 1

    def test_missing_flag_keeps_env(self, monkeypatch):
        import argparse

        from medibot.cli.commands import _configure

        monkeypatch.setenv("MEDIBOT_TOP_K", "5")
        args = argparse.Namespace(dataset=None, top_k=None, verbose=False)

        assert _configure(args).top_k == 5

    def test_search_honors_top_k_one(self, capsys):
        from medibot.cli.commands import run_search_cli

        with patch("sys.argv", ["medibot", "wheezing", "chest", "tightness", "--top-k", "1"]):
            result = run_search_cli()

        out = capsys.readouterr().out
        assert result == 0
        assert out.startswith("1. Asthma")
        assert "2. " not in out


class TestChatCli:
    """Test the interactive loop."""

    def test_chat_until_exit(self, capsys):
        from medibot.cli.commands import run_chat_cli

        with patch("sys.argv", ["medibot"]):
            with patch("builtins.input", side_effect=["What is asthma?", "exit"]):
                result = run_chat_cli()

        out = capsys.readouterr().out
        assert result == 0
        assert "Asthma" in out

    def test_chat_stops_on_eof(self):
        from medibot.cli.commands import run_chat_cli

        with patch("sys.argv", ["medibot"]):
            with patch("builtins.input", side_effect=EOFError()):
                assert run_chat_cli() == 0


class TestEvalCli:
    """Test the retrieval gate command."""

    def test_eval_prints_gate(self, capsys):
        from medibot.cli.commands import run_eval_cli

        with patch("sys.argv", ["medibot", "--quiet"]):
            result = run_eval_cli()

        out = capsys.readouterr().out
        assert result in (0, 1)
        assert "RETRIEVAL QUALITY EVAL" in out
        assert "RETRIEVAL EVAL GATE" in out


# ---------------------------------------------------------------------------
# RENDERING
# ---------------------------------------------------------------------------


class TestRenderResponse:
    """Test plain-text rendering."""

    def test_render_local(self):
        from medibot.cli import render_response

        response = ChatResponse(
            source="local",
            query="q",
            title="Asthma",
            intent="symptoms",
            confidence=0.456,
            sections=[ResponseSection(title="Symptoms", items=["Wheezing"], priority=True)],
            entities=["chest"],
            safety_notes=[SafetyNote(message="Educational only.", type="educational_only")],
        )

        text = render_response(response)

        assert text.splitlines()[0] == "Asthma (46% confidence, intent: symptoms)"
        assert "  * Wheezing" in text
        assert "Detected: chest" in text
        assert "Note: Educational only." in text
