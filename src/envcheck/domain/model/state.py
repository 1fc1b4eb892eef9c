"""Per-file analysis state for the env access rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envcheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class AccessSite:
    """One ``alias.NAME`` occurrence in source.

    Attributes:
        property_name: Accessed name (NAME)
        location: Location of the property identifier
        is_private: Server-only classification, fixed at record time
    """

    property_name: str
    location: Location
    is_private: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.property_name:
            raise ValueError("property_name must not be empty")
        if self.location is None:
            raise TypeError("location must not be None")


@dataclass(slots=True)
class AnalysisState:
    """Accumulator for one file's traversal.

    Mutable: detectors write into it while the tree is walked, the
    decision step reads it once at Program:exit. Never shared across files.

    Attributes:
        is_client_directive_seen: First statement is "use client"
        tracked_alias_name: Local name bound to the env import (first import wins)
        is_force_dynamic_seen: File exports dynamic = "force-dynamic"
        access_sites: Accesses on the tracked alias, in document order
    """

    is_client_directive_seen: bool = False
    tracked_alias_name: str | None = None
    is_force_dynamic_seen: bool = False
    access_sites: list[AccessSite] = field(default_factory=list)

    def mark_client_directive(self) -> None:
        """Record the client directive."""
        self.is_client_directive_seen = True

    def mark_force_dynamic(self) -> None:
        """Record the force-dynamic export."""
        self.is_force_dynamic_seen = True

    def track_alias(self, name: str) -> bool:
        """Bind the env alias unless one is already bound.

        Args:
            name: Local identifier of the import specifier

        Returns:
            True if bound now, False if an earlier import already won

        Raises:
            ValueError: If name is empty
        """
        if not name:
            raise ValueError("alias name must not be empty")

        if self.tracked_alias_name is not None:
            return False

        self.tracked_alias_name = name
        return True

    def record_access(self, site: AccessSite) -> None:
        """Append an access on the tracked alias.

        Raises:
            RuntimeError: If no alias is tracked yet (FAIL-FIRST)
        """
        if self.tracked_alias_name is None:
            raise RuntimeError("cannot record access before env import is tracked")
        self.access_sites.append(site)

    @property
    def private_sites(self) -> tuple[AccessSite, ...]:
        """Server-only accesses, in document order."""
        return tuple(site for site in self.access_sites if site.is_private)
