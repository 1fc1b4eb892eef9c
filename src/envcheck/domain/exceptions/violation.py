"""Lint violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from envcheck.domain.exceptions.base import EnvCheckError

if TYPE_CHECKING:
    from envcheck.domain.model.diagnostic import Diagnostic


class ViolationsFoundError(EnvCheckError):
    """Lint diagnostics found where none were expected.

    Raised by assert_no_violations() in the pytest plugin when a lint run
    over ESTree documents produced any diagnostic, e.g. a page that reads
    ``env.DATABASE_URL`` without ``export const dynamic = "force-dynamic"``.
    The message lists every diagnostic as ``location [SEVERITY] rule-id: message``.
    Never raised during analysis itself.

    Attributes:
        diagnostics: All found diagnostics, in report order (non-empty)
    """

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        if not diagnostics:
            raise ValueError("ViolationsFoundError requires at least one diagnostic")

        self.diagnostics = diagnostics

        msg_parts = [f"Found {len(diagnostics)} violation(s):"]
        for d in diagnostics:
            msg_parts.append(str(d))

        super().__init__("\n".join(msg_parts))
