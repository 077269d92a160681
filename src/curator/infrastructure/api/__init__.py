"""HTTP API for Curator."""
