"""Exceptions and session lifecycle."""
