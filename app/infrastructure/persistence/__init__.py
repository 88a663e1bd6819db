"""Persistence layer (in-memory repositories)."""
