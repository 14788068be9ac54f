"""Secrets and authentication configuration."""

from __future__ import annotations

ENV_RELAY_API_KEY = "RELAY_API_KEY"

__all__ = ["ENV_RELAY_API_KEY"]
