"""Application layer: rules, linter service, reporters."""
