"""Persistence layer: database bootstrap, models and repositories."""
