"""
CLI - Command-line interface for the Vibe Coder brief generator.

Commands:
1. improve: turn an idea into a brief, locally or through the providers
2. serve: run the HTTP API
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .core.config import AppConfig, load_config
from .llm import MockLLMClient
from .models import QuotaExceeded
from .providers import ProviderChain, build_default_chain
from .synthesizer import improve_prompt
from .utils.logger import setup_logging, get_logger
from .validator import validate_idea

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="vibecoder",
        description="Turn a short project idea into a structured project brief",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s improve "I want to build an online store to sell shoes"
  %(prog)s improve "A booking site for a hair salon" --ai --json
  %(prog)s serve --port 8000
        """,
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (YAML)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    improve_parser = subparsers.add_parser("improve", help="Generate a brief for an idea")
    improve_parser.add_argument("idea", help="Project idea (10-1000 characters)")
    improve_parser.add_argument(
        "--ai",
        action="store_true",
        help="Use the remote provider chain instead of the local generator",
    )
    improve_parser.add_argument(
        "--mock-llm",
        action="store_true",
        help="Use a mock provider for --ai (no API calls)",
    )
    improve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address (default from config)")
    serve_parser.add_argument("--port", type=int, help="Port (default: PORT or 5000)")
    serve_parser.add_argument("--debug", action="store_true", help="Run Flask in debug mode")

    return parser.parse_args(argv)


def improve_command(args: argparse.Namespace, config: AppConfig) -> int:
    """
    Generate and print a brief.

    Returns:
        Exit code (0 for success, 1 for invalid idea or no provider)
    """
    validation = validate_idea(args.idea)
    if not validation.is_valid:
        for error in validation.errors:
            logger.error(error)
        return 1

    if args.ai:
        if args.mock_llm:
            chain = ProviderChain([MockLLMClient()])
            logger.info("Using mock LLM client")
        else:
            chain = build_default_chain(config)
        try:
            result = chain.ai_improve(validation.idea)
        finally:
            chain.close()
    else:
        result = improve_prompt(validation.idea)

    if isinstance(result, QuotaExceeded):
        logger.error(f"{result.error}: {result.message}")
        if args.json:
            print(json.dumps({"success": False, **result.to_dict()}, indent=2))
        return 1

    if args.json:
        print(json.dumps({"success": True, "data": result.to_dict()}, indent=2, ensure_ascii=False))
    else:
        print(result.improved)
    return 0


def serve_command(args: argparse.Namespace, config: AppConfig) -> int:
    """Run the Flask development server."""
    from .api import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port

    app = create_app(config=config)
    logger.info(f"Server running on http://{host}:{port}")
    app.run(host=host, port=port, debug=args.debug)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        setup_logging(level="INFO")
        logger.error(f"Invalid configuration: {e}")
        return 1

    log_level = "DEBUG" if args.verbose else config.logging.level
    setup_logging(level=log_level, format_string=config.logging.format, log_file=config.logging.file)

    if args.command == "improve":
        return improve_command(args, config)
    if args.command == "serve":
        return serve_command(args, config)

    logger.error("No command given, use --help for usage")
    return 1


if __name__ == "__main__":
    sys.exit(main())
