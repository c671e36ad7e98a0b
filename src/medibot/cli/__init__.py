"""
CLI module - command-line interface.

Provides entry points for:
- Asking single questions
- Ranked search over the knowledge base
- Interactive chat
- The retrieval quality gate
"""

from medibot.cli.commands import (
    main,
    render_response,
    run_ask_cli,
    run_chat_cli,
    run_eval_cli,
    run_search_cli,
)

__all__ = [
    "main",
    "render_response",
    "run_ask_cli",
    "run_chat_cli",
    "run_eval_cli",
    "run_search_cli",
]
