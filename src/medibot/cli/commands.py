"""
CLI commands - entry points for the chatbot and its retrieval gate.

Each command follows a consistent pattern:
1. Parse arguments
2. Load environment
3. Build the knowledge base
4. Print results
5. Return exit code

Commands are thin wrappers; all behavior lives in the engine modules.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from medibot.config import MedibotConfig, get_config
from medibot.schemas import ChatResponse, Document

if TYPE_CHECKING:
    from medibot.agent import MedicalChatbot


def _load_env() -> None:
    """Load environment variables from .env file."""
    from dotenv import load_dotenv

    load_dotenv()


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--dataset", help="JSON dataset file (default: built-in conditions)")
    parser.add_argument("--top-k", type=int, default=None, help="Matches per query")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")


def _configure(args: argparse.Namespace) -> MedibotConfig:
    """Merge command-line overrides into the environment config. Raises ValueError."""
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    base = get_config()
    return MedibotConfig(
        dataset_path=args.dataset or base.dataset_path,
        top_k=args.top_k if args.top_k is not None else base.top_k,
        local_only=base.local_only,
    )


def _load_collection(config: MedibotConfig) -> list[Document]:
    """Load the configured documents. Raises DatasetLoadError."""
    from medibot.retrieval import get_medical_documents, load_documents

    if config.dataset_path:
        return load_documents(config.dataset_path, strict=True)
    return get_medical_documents()


def render_response(response: ChatResponse) -> str:
    """Plain-text rendering of a chatbot answer."""
    lines = []
    if response.source == "local":
        lines.append(
            f"{response.title} "
            f"({round(response.confidence * 100)}% confidence, intent: {response.intent})"
        )
    if response.message:
        lines.append(response.message)
    for section in response.sections:
        marker = "*" if section.priority else "-"
        lines.append(f"\n{section.title}:")
        lines.extend(f"  {marker} {item}" for item in section.items)
    if response.entities:
        lines.append(f"\nDetected: {', '.join(response.entities)}")
    for note in response.safety_notes:
        lines.append(f"\nNote: {note.message}")
    return "\n".join(lines)


def _build_chatbot(config: MedibotConfig) -> MedicalChatbot:
    from medibot.agent import MedicalChatbot
    from medibot.responders import get_fallback_responder
    from medibot.retrieval import KnowledgeBase

    return MedicalChatbot(
        store=KnowledgeBase(_load_collection(config)),
        fallback=get_fallback_responder(config),
        top_k=config.top_k,
    )


def run_ask_cli() -> int:
    """CLI entry point for a single question."""
    from medibot.retrieval import DatasetLoadError

    _load_env()

    parser = argparse.ArgumentParser(description="Ask the medical chatbot one question")
    parser.add_argument("question", nargs="+", help="Question text")
    parser.add_argument("--json", action="store_true", help="Print the structured answer")
    _add_common_args(parser)
    args = parser.parse_args()

    try:
        config = _configure(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        bot = _build_chatbot(config)
    except DatasetLoadError as e:
        print(f"Dataset load failed: {e}", file=sys.stderr)
        return 1

    response = bot.answer(" ".join(args.question))
    if response is None:
        print("Please enter a question.", file=sys.stderr)
        return 1

    if args.json:
        print(response.model_dump_json(indent=2))
    else:
        print(render_response(response))
    return 0


def run_search_cli() -> int:
    """CLI entry point for raw ranked search."""
    from medibot.retrieval import DatasetLoadError, get_store

    _load_env()

    parser = argparse.ArgumentParser(description="Rank conditions against a query")
    parser.add_argument("query", nargs="+", help="Query text")
    parser.add_argument(
        "--strategy",
        choices=["tfidf", "keyword"],
        default="tfidf",
        help="Retrieval strategy",
    )
    _add_common_args(parser)
    args = parser.parse_args()

    try:
        config = _configure(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        store = get_store(args.strategy, _load_collection(config))
    except DatasetLoadError as e:
        print(f"Dataset load failed: {e}", file=sys.stderr)
        return 1

    matches = store.search(" ".join(args.query), limit=config.top_k)
    if not matches:
        print("No relevant conditions found.")
        return 0

    for i, match in enumerate(matches, 1):
        print(f"{i}. {match.document.name} ({match.similarity:.3f})")
    return 0


def run_chat_cli() -> int:
    """CLI entry point for an interactive session."""
    from medibot.retrieval import DatasetLoadError

    _load_env()

    parser = argparse.ArgumentParser(description="Interactive medical chatbot")
    _add_common_args(parser)
    args = parser.parse_args()

    try:
        config = _configure(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        bot = _build_chatbot(config)
    except DatasetLoadError as e:
        print(f"Dataset load failed: {e}", file=sys.stderr)
        return 1

    print("Hello! I'm MEDIBOT, your medical information assistant.")
    print("This chatbot is for educational purposes only. Type 'exit' to quit.")

    while True:
        try:
            line = input("\n> ")
        except EOFError:
            break
        if line.strip().lower() in ("exit", "quit"):
            break
        response = bot.answer(line)
        if response is not None:
            print(render_response(response))
    return 0


def run_eval_cli() -> int:
    """CLI entry point for the retrieval quality gate."""
    from medibot.evals import print_retrieval_report, run_retrieval_eval

    _load_env()

    parser = argparse.ArgumentParser(description="Run retrieval quality eval")
    parser.add_argument("--quiet", action="store_true", help="Minimal output")
    parser.add_argument("--threshold", type=float, default=0.8, help="Minimum F1 per query")
    args = parser.parse_args()

    print("=" * 60)
    print("RETRIEVAL QUALITY EVAL")
    print("=" * 60)

    report = run_retrieval_eval(threshold=args.threshold)
    return print_retrieval_report(report, quiet=args.quiet)


def main() -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        medibot ask "What causes asthma?"
        medibot search "wheezing chest tightness"
        medibot chat
        medibot eval
    """
    _load_env()

    parser = argparse.ArgumentParser(
        description="MEDIBOT medical information chatbot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  ask       Answer one question
  search    Show ranked conditions for a query
  chat      Interactive question loop
  eval      Run the retrieval quality gate

Examples:
  medibot ask "What are the symptoms of asthma?"
  medibot search "fever cough" --top-k 5
  medibot ask "how is diabetes treated" --dataset data/medical_data.json
        """,
    )

    parser.add_argument(
        "command",
        choices=["ask", "search", "chat", "eval"],
        help="Command to run",
    )

    args, remaining = parser.parse_known_args()

    commands = {
        "ask": run_ask_cli,
        "search": run_search_cli,
        "chat": run_chat_cli,
        "eval": run_eval_cli,
    }

    # Re-inject remaining args for the subcommand
    sys.argv = [sys.argv[0]] + remaining

    try:
        return commands[args.command]()
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
