"""Shared helpers: provider URL normalization and localized messages."""
