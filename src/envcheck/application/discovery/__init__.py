"""Input discovery."""

from envcheck.application.discovery.files import DEFAULT_PATTERN, discover_files

__all__ = ["DEFAULT_PATTERN", "discover_files"]
