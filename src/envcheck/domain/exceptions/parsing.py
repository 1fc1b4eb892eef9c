"""Parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from envcheck.domain.exceptions.base import EnvCheckError

if TYPE_CHECKING:
    from pathlib import Path

    from envcheck.domain.model.location import Location


class ParsingError(EnvCheckError):
    """ESTree document could not be loaded.

    envcheck never parses JavaScript or TypeScript source; it reads the
    JSON tree an external parser (typescript-estree with ``loc: true``)
    wrote out. Raised by load_program() when the file is missing,
    unreadable or a directory, is not UTF-8, is not valid JSON, or its
    root is not an object of type ``Program``.

    Attributes:
        path: File that failed to load
        reason: Why loading failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class ASTError(ParsingError):
    """Error in ESTree structure.

    The document decoded as a Program, but a node the rule must locate
    is malformed, e.g. it has no ``loc.start`` with integer ``line`` and
    ``column`` (the tree was produced without ``loc: true``). Raised by
    make_location() when an env access is recorded; the run fails
    rather than report at a made-up position.

    Attributes:
        path: File with invalid tree
        location: Location of error (start of file when the node has none)
        reason: Why the tree is invalid
    """

    def __init__(
        self,
        path: Path,
        location: Location,
        reason: str,
    ) -> None:
        # FAIL-FIRST: validate required parameters
        if location is None:
            raise TypeError("location must not be None")

        self.location = location
        super().__init__(path, f"{reason} at {location}")
