"""Domain layer for Curator."""
