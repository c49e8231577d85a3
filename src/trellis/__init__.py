"""Provision GitHub repositories for a hierarchical issue workflow."""
