#!/usr/bin/env python3
"""
Vibe Coder - turn a short project idea into a structured project brief.

Usage:
    python main.py improve "<idea>" [--ai] [--json] [--mock-llm]
    python main.py serve [--host HOST] [--port PORT]

Examples:
    python main.py improve "I want to build an online store to sell shoes"
    python main.py improve "A tutoring platform with video lessons" --ai --json
    python main.py serve --port 5000
"""

import sys

from vibecoder.cli import main


if __name__ == "__main__":
    sys.exit(main())
