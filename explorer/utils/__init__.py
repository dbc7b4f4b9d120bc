"""Formatting utilities."""
