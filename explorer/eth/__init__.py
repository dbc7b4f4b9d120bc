"""Ethereum ABI helpers."""
