"""CLI entrypoints for codemedic commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import REPORT_FORMATS, ConfigError, load_config
from .logging import configure_logging, get_logger
from .report.renderers import get_renderer
from .scanner.repository import RepositoryScanner


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codemedic",
        description="Inspect .NET project files and report on repository health.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    health_parser = subparsers.add_parser(
        "health",
        help="Display the repository health dashboard.",
    )
    _add_verbose_option(health_parser, suppress_default=True)
    health_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )
    health_parser.add_argument(
        "--format",
        choices=REPORT_FORMATS,
        default=None,
        help="Output format (defaults to the configured format, then console).",
    )
    health_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the rendered report to this file instead of stdout.",
    )
    health_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colour in console output.",
    )

    return parser


def run_health(args: argparse.Namespace) -> int:
    """Scan the repository, render the report and return an exit status."""
    logger = get_logger("cli")
    root = Path(args.path).expanduser().resolve()
    try:
        config = load_config(root)
    except ConfigError as exc:
        print(f"codemedic: invalid configuration: {exc}", file=sys.stderr)
        return 1

    try:
        scanner = RepositoryScanner(root, config=config)
        scanner.scan()
        document = scanner.generate_report()

        fmt = args.format or config.report.format
        if fmt == "console":
            use_color = not args.no_color and args.output is None and sys.stdout.isatty()
            renderer = get_renderer(fmt, color=use_color)
        else:
            renderer = get_renderer(fmt)
        rendered = renderer.render(document)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Health command failed", exc_info=True)
        print(
            f"Failed to analyze repository: {exc}\nRun with --verbose for more details.",
            file=sys.stderr,
        )
        return 1

    if args.output is not None:
        try:
            args.output.write_text(rendered, encoding="utf-8")
        except OSError as exc:
            print(f"Failed to write report: {exc}", file=sys.stderr)
            return 1
        print(f"Report written to {_relativize(args.output)}")
    else:
        sys.stdout.write(rendered)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for codemedic commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "health":
        return run_health(args)
    parser.exit(1, "Unknown command\n")  # pragma: no cover - argparse enforces choices
    return 1  # pragma: no cover


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
