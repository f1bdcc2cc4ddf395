"""Matchers, the retry engine and assertion operations."""
