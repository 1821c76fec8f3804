"""Threadboard: users, posts and threaded comments over GraphQL."""

__version__ = "0.1.0"
