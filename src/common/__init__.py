"""Shared helpers: errors, logging and message formatting."""
