"""Ownership-scoped persistence for todo lists."""
