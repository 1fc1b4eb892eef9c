"""Infrastructure: ESTree handling and file adapters."""
