"""Core package: shared Qt imports."""
