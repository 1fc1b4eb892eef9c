"""Position of a node in an ESTree document."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Start (and optionally end) of a node, as given by its ``loc``.

    Lines are 1-based and columns 0-based, as ESTree parsers emit them.
    Reporters convert columns to 1-based for display.

    Attributes:
        file: Analyzed document
        line: ``loc.start.line``
        column: ``loc.start.column``
        end_line: ``loc.end.line``, None if the parser omitted it
        end_column: ``loc.end.column``, None if the parser omitted it
    """

    file: Path
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        if self.end_line is not None and self.end_line < self.line:
            raise ValueError(f"end_line ({self.end_line}) must be >= line ({self.line})")
        if self.end_column is not None and self.end_column < 0:
            raise ValueError(f"end_column must be >= 0, got {self.end_column}")
        if self.end_line == self.line and self.end_column is not None and self.end_column < self.column:
            raise ValueError(
                f"end_column ({self.end_column}) must be >= column ({self.column}) on one line"
            )

    @property
    def sort_key(self) -> tuple[int, int]:
        """Document order within one file."""
        return (self.line, self.column)

    def __str__(self) -> str:
        """``file:line:column`` with the raw 0-based column."""
        return f"{self.file}:{self.line}:{self.column}"
