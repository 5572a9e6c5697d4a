"""Adapters binding the domain to third-party formats and storage."""
