"""Gateways wrapping the GitHub CLI."""
