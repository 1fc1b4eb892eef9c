"""Linter service: drives rules over ESTree trees.

One traversal per file. Every enabled rule gets a fresh RuleContext and
fresh handlers per file, so files are independent and may be linted in
parallel.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from envcheck.application.rules._registry import default_config, get_rule
from envcheck.application.services.context import RuleContext
from envcheck.domain.model.lint_result import FileResult, LintResult
from envcheck.infrastructure.adapters.estree_loader import load_program
from envcheck.infrastructure.estree.traversal import Phase, walk

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from envcheck.domain.model.enums import Severity
    from envcheck.domain.model.lint_config import LintConfig
    from envcheck.domain.ports.rule import Handler, Node, RuleProtocol

logger = logging.getLogger(__name__)

EXIT_SUFFIX = ":exit"


class Linter:
    """Runs enabled rules over ESTree programs.

    Rule options are validated at construction, before any file is seen.
    FAIL-FIRST: load errors propagate as ParsingError.
    """

    def __init__(self, config: LintConfig | None = None) -> None:
        """Initialize linter.

        Args:
            config: Run configuration. Uses default_config() if None.

        Raises:
            RuleValidationError: Unknown rule id or invalid rule options
        """
        self._config = config if config is not None else default_config()
        self._rules: tuple[tuple[RuleProtocol, Severity], ...] = tuple(
            (get_rule(rule_id).from_options(setting.options), setting.severity)
            for rule_id, setting in self._config.rules.items()
        )
        logger.debug("enabled rules: %s", ", ".join(self._config.rules) or "<none>")

    @property
    def config(self) -> LintConfig:
        """Run configuration."""
        return self._config

    @property
    def rules(self) -> tuple[RuleProtocol, ...]:
        """Enabled rule instances."""
        return tuple(rule for rule, _ in self._rules)

    def lint_program(self, program: Node, path: Path) -> FileResult:
        """Lint one already-loaded Program.

        Args:
            program: ESTree Program node
            path: Source path for locations

        Returns:
            FileResult with diagnostics sorted by location
        """
        contexts: list[RuleContext] = []
        dispatch: dict[str, list[Handler]] = {}

        for rule, severity in self._rules:
            context = RuleContext(rule.meta, severity, path)
            contexts.append(context)
            for selector, handler in rule.create(context).items():
                dispatch.setdefault(selector, []).append(handler)

        for phase, node in walk(program):
            selector = node["type"] if phase is Phase.ENTER else node["type"] + EXIT_SUFFIX
            for handler in dispatch.get(selector, ()):
                handler(node)

        diagnostics = sorted(
            (d for context in contexts for d in context.diagnostics),
            key=lambda d: d.location.sort_key,
        )
        return FileResult(path=path, diagnostics=tuple(diagnostics))

    def lint_file(self, path: Path) -> FileResult:
        """Load and lint one ESTree JSON file.

        Raises:
            ParsingError: File cannot be loaded
        """
        result = self.lint_program(load_program(path), path)
        logger.debug("%s: %d diagnostic(s)", path, len(result.diagnostics))
        return result

    def lint_files(self, paths: Iterable[Path], *, jobs: int = 1) -> LintResult:
        """Lint many files.

        Args:
            paths: ESTree JSON files
            jobs: Worker threads (1 = sequential)

        Returns:
            LintResult with files in input order

        Raises:
            ValueError: If jobs < 1
            ParsingError: Any file cannot be loaded
        """
        if jobs < 1:
            raise ValueError(f"jobs must be >= 1, got {jobs}")

        path_list = list(paths)
        started = time.perf_counter()

        if jobs == 1 or len(path_list) <= 1:
            results = [self.lint_file(path) for path in path_list]
        else:
            with ThreadPoolExecutor(max_workers=jobs) as executor:
                results = list(executor.map(self.lint_file, path_list))

        result = LintResult(files=tuple(results))
        logger.info(
            "linted %d file(s) in %.1f ms: %d error(s), %d warning(s)",
            result.file_count,
            (time.perf_counter() - started) * 1000,
            result.error_count,
            result.warning_count,
        )
        return result
