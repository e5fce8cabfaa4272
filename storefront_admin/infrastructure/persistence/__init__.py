"""Persistence: engine/session factory, ORM models, repositories."""
