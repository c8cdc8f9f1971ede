"""Command-line entry point for Backtalk."""

import sys
import argparse
import logging
import mimetypes
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from backtalk.models.audio import EncodedAudioBlob
from backtalk.models.errors import DecodeError
from backtalk.scoring.grading import grade_score
from backtalk.services.audio_service import AudioService

from .config import BacktalkConfig

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "audio/wav"


def setup_logging(config: BacktalkConfig, level: Optional[str] = None) -> None:
    """Set up logging configuration from YAML config."""
    level = level or config.get('logging.level', 'INFO')
    log_file_path = config.get('logging.file_path')
    console_output = config.get('logging.console_output', True)

    handlers = []

    # File handler - only when a log file is configured
    if log_file_path:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        file_handler.setFormatter(file_formatter)
        handlers.append(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)  # Only show warnings and above on console
        console_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        console_handler.setFormatter(console_formatter)
        handlers.append(console_handler)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in handlers:
        root_logger.addHandler(handler)

    logger.info(f"Backtalk starting up, log level {level}, log file: {log_file_path}")


def read_blob(path: str) -> EncodedAudioBlob:
    """Read an audio file, guessing its MIME type from the suffix."""
    mime_type, _ = mimetypes.guess_type(path)
    if not mime_type:
        mime_type = DEFAULT_MIME_TYPE
    return EncodedAudioBlob(data=Path(path).read_bytes(), mime_type=mime_type)


def cmd_reverse(service: AudioService, args: argparse.Namespace, console: Console) -> None:
    reversed_blob = service.reverse_blob(read_blob(args.input))
    Path(args.output).write_bytes(reversed_blob.data)
    console.print(f"Reversed audio written to [bold]{args.output}[/bold] ({reversed_blob.size} bytes)")


def cmd_score(service: AudioService, args: argparse.Namespace, console: Console) -> None:
    breakdown = service.compare(read_blob(args.original), read_blob(args.imitation))
    grade = grade_score(breakdown.score)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Duration", f"{breakdown.duration:.3f}")
    table.add_row("Amplitude", f"{breakdown.amplitude:.3f}")
    table.add_row("Pattern", f"{breakdown.pattern:.3f}")
    console.print(table)

    status = "level complete" if service.is_level_complete(breakdown.score) else "try again"
    console.print(Panel(
        f"[bold {grade.colour}]{breakdown.score}%[/] {grade.tier}\n{grade.message} ({status})",
        title="Similarity Score",
    ))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="backtalk",
        description="Backtalk - reverse recordings and score backwards imitations",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file (default: built-in settings)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (overrides config)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="Backtalk v0.1.0"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    reverse_parser = subparsers.add_parser("reverse", help="Reverse a recording into a WAV file")
    reverse_parser.add_argument("input", help="Recording to reverse")
    reverse_parser.add_argument("output", help="Where to write the reversed WAV")
    reverse_parser.set_defaults(handler=cmd_reverse)

    score_parser = subparsers.add_parser("score", help="Score an imitation against an original")
    score_parser.add_argument("original", help="Original recording")
    score_parser.add_argument("imitation", help="Imitation recording")
    score_parser.set_defaults(handler=cmd_score)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for Backtalk."""
    args = build_parser().parse_args(argv)
    console = Console()

    try:
        config = BacktalkConfig(args.config)
        setup_logging(config, args.log_level)
        service = AudioService(config)
        args.handler(service, args, console)
    except DecodeError as e:
        console.print(f"[red]Could not decode audio ({e.reason.value}): {e}[/red]")
        logger.error(f"Decode error: {e}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        logger.error(f"Application error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
