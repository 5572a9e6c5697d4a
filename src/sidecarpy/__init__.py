"""Normalize third-party archive metadata sidecars into canonical records."""
