"""Shared helpers: logging setup and generators."""
