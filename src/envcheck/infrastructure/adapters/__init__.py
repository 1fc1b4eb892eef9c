"""File adapters: ESTree documents and config files."""

from envcheck.infrastructure.adapters.config_loader import load_config
from envcheck.infrastructure.adapters.estree_loader import load_program, load_program_text

__all__ = ["load_config", "load_program", "load_program_text"]
