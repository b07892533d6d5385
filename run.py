#!/usr/bin/env python3
"""
Typed Answer Scoring - Launcher

Starts the scoring API, or scores a single typed answer from the command line.

Usage:
    python run.py                                   # Serve the API on localhost:8000
    python run.py serve --host 0.0.0.0 --reload     # Network accessible, auto-reload
    python run.py score --shown Herz --associated Karo --input "herz "

Environment Variables:
    - DISTANCE_THRESHOLD: Default threshold when a trial does not set one (3)
    - NEAR_MISS_ASSOCIATED: Enable the maybe_associated_card outcome (false)
    - LOG_LEVEL: Logging level (info)
"""

import argparse
import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
BACKEND_DIR = ROOT / "backend"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8000

EXIT_INVALID_ARGUMENT = 2


# ANSI color codes
class Color:
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    GRAY = '\033[90m'


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in an ANSI color code when color output is enabled."""
    if not enabled:
        return text
    return f"{color}{text}{Color.RESET}"


def _ensure_backend_importable() -> None:
    if str(BACKEND_DIR) not in sys.path:
        sys.path.insert(0, str(BACKEND_DIR))


def build_serve_command(host: str, port: int, reload: bool) -> list[str]:
    """uvicorn command line for the API server."""
    cmd = [
        sys.executable,
        '-m', 'uvicorn',
        'answer_scoring.main:app',
        '--port', str(port),
        '--host', host,
    ]
    if reload:
        cmd.append('--reload')
    return cmd


def serve(args: argparse.Namespace) -> int:
    cmd = build_serve_command(args.host, args.port, args.reload)
    print(colorize(f"Starting API on http://{args.host}:{args.port}", Color.GREEN, args.color))
    print(colorize("Press Ctrl+C to stop", Color.GRAY, args.color))
    try:
        result = subprocess.run(cmd, cwd=str(BACKEND_DIR))
    except KeyboardInterrupt:
        return 0
    return result.returncode


def score(args: argparse.Namespace) -> int:
    _ensure_backend_importable()
    from answer_scoring.core.exceptions import InvalidArgumentError
    from answer_scoring.core.trial_scorer import TrialScorer

    scorer = TrialScorer()
    try:
        record, notice = scorer.score_with_notice(
            playing_card=args.shown,
            associated=args.associated,
            input=args.input,
            distance=args.distance,
        )
    except InvalidArgumentError as e:
        print(colorize(f"Invalid argument: {e}", Color.RED, args.color), file=sys.stderr)
        return EXIT_INVALID_ARGUMENT

    print(json.dumps(record.model_dump(), ensure_ascii=False, indent=2))
    if notice is not None:
        print(colorize(notice.message, Color.YELLOW, args.color), file=sys.stderr)
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description='Typed Answer Scoring - Launcher',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py                                  # Start the API (localhost only)
  python run.py serve --host 0.0.0.0             # Start on all interfaces
  python run.py score --shown Herz --associated Karo --input "herz "
        """
    )
    parser.add_argument(
        '--no-color',
        dest='color',
        action='store_false',
        help='Disable colored output'
    )
    subparsers = parser.add_subparsers(dest='command')

    serve_parser = subparsers.add_parser('serve', help='Run the scoring API server')
    serve_parser.add_argument(
        '--host',
        type=str,
        default=DEFAULT_HOST,
        help=f'Host to bind to (default: {DEFAULT_HOST})'
    )
    serve_parser.add_argument(
        '--port',
        type=int,
        default=DEFAULT_PORT,
        help=f'Port to bind to (default: {DEFAULT_PORT})'
    )
    serve_parser.add_argument(
        '--reload',
        action='store_true',
        help='Restart the server when source files change'
    )

    score_parser = subparsers.add_parser('score', help='Score one typed answer')
    score_parser.add_argument('--shown', required=True, help='Card the participant was shown')
    score_parser.add_argument('--associated', required=True, help='Card associated with it')
    score_parser.add_argument('--input', default='', help='Raw captured keystrokes')
    score_parser.add_argument(
        '--distance',
        type=int,
        default=None,
        help='Distance threshold (default: DISTANCE_THRESHOLD setting)'
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    if os.environ.get('NO_COLOR') or not sys.stdout.isatty():
        args.color = False

    if args.command == 'score':
        return score(args)
    if args.command is None:
        args.host, args.port, args.reload = DEFAULT_HOST, DEFAULT_PORT, False
    return serve(args)


if __name__ == '__main__':
    sys.exit(main())
