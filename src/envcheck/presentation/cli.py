"""
CLI entry point for envcheck.

Usage:
    envcheck PATH...                   Lint ESTree JSON files / directories
    envcheck app/ --format json        Machine-readable output
    envcheck app/ --env-source ~/env   Custom env accessor import path

Input files are ESTree documents (``*.estree.json`` when scanning
directories) produced by an external parser, e.g. typescript-estree with
``loc: true``.

Exit codes:
    0  no errors (warnings allowed)
    1  errors reported
    2  usage, configuration or input failure
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from envcheck import __version__
from envcheck.application.discovery.files import DEFAULT_PATTERN, discover_files
from envcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from envcheck.application.reporters.json_reporter import JSONReporter
from envcheck.application.reporters.plain_text import PlainTextReporter
from envcheck.application.rules._registry import default_config
from envcheck.application.rules.require_force_dynamic import RULE_ID
from envcheck.application.services.linter import Linter
from envcheck.domain.exceptions.base import EnvCheckError
from envcheck.domain.model.configuration import ENV_SOURCE_OPTION, SERVER_ONLY_PATTERN_OPTION
from envcheck.domain.model.lint_config import RuleSetting, parse_level
from envcheck.infrastructure.adapters.config_loader import load_config

if TYPE_CHECKING:
    from collections.abc import Sequence

    from envcheck.domain.model.lint_config import LintConfig
    from envcheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_FAILURE = 2

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="envcheck",
        description=(
            "Flag server-only env variables read in Next.js modules that are "
            "statically rendered (no `export const dynamic = 'force-dynamic'`)."
        ),
    )
    parser.add_argument("paths", nargs="+", type=Path, help="ESTree JSON files or directories")
    parser.add_argument("--config", type=Path, help="JSON config file ({\"rules\": {...}})")
    parser.add_argument("--env-source", help="import path of the env accessor (default: @/env)")
    parser.add_argument(
        "--server-only-pattern",
        help="regex matching server-only names (default: ^(?!NEXT_PUBLIC_).*)",
    )
    parser.add_argument(
        "--severity",
        choices=("error", "warn", "off"),
        help=f"severity of {RULE_ID}",
    )
    parser.add_argument(
        "--format",
        choices=("console", "plain", "json"),
        default="console",
        help="output format (default: console)",
    )
    parser.add_argument("--pattern", default=DEFAULT_PATTERN, help="glob used inside directories")
    parser.add_argument("--jobs", "-j", type=int, default=1, help="worker threads")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="-v info, -vv debug")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbosity: int) -> None:
    """Send envcheck logs to stderr at the requested verbosity."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def resolve_config(args: argparse.Namespace) -> LintConfig:
    """Merge config file (or defaults) with command-line overrides.

    Raises:
        ConfigurationError: Unreadable or malformed config
    """
    config = load_config(args.config) if args.config else default_config()

    overrides: dict[str, object] = {}
    if args.env_source is not None:
        overrides[ENV_SOURCE_OPTION] = args.env_source
    if args.server_only_pattern is not None:
        overrides[SERVER_ONLY_PATTERN_OPTION] = args.server_only_pattern

    if args.severity is None and not overrides:
        return config

    current = config.rules.get(RULE_ID, RuleSetting())
    severity = current.severity if args.severity is None else parse_level(RULE_ID, args.severity)
    if severity is None:
        return config.with_rule(RULE_ID, None)

    return config.with_rule(
        RULE_ID,
        RuleSetting(severity=severity, options={**current.options, **overrides}),
    )


def make_reporter(args: argparse.Namespace) -> ReporterProtocol:
    """Pick reporter for --format."""
    match args.format:
        case "json":
            return JSONReporter()
        case "plain":
            return PlainTextReporter()
        case _:
            color = not args.no_color and sys.stdout.isatty()
            return ConsoleReporter(ConsoleConfig(color=color))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.jobs < 1:
        parser.error("--jobs must be >= 1")

    try:
        linter = Linter(resolve_config(args))
        paths = discover_files(args.paths, args.pattern)
        if not paths:
            print(f"envcheck: no files matching {args.pattern}", file=sys.stderr)
            return EXIT_FAILURE
        result = linter.lint_files(paths, jobs=args.jobs)
    except (EnvCheckError, FileNotFoundError) as e:
        logger.debug("aborted", exc_info=True)
        print(f"envcheck: {e}", file=sys.stderr)
        return EXIT_FAILURE

    sys.stdout.write(make_reporter(args).report(result))
    return EXIT_OK if result.passed else EXIT_VIOLATIONS


if __name__ == "__main__":
    raise SystemExit(main())
