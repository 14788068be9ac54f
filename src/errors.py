"""Shared error types for the relay hub."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RateLimitError(Exception):
    """Raised when a sliding-window rate limiter is saturated."""

    retry_in: float
    limit: int
    window_seconds: float


@dataclass(frozen=True, slots=True)
class InvalidScreenshotError(Exception):
    """Raised for screenshot names or payloads the store refuses to touch."""

    reason: str


@dataclass(frozen=True, slots=True)
class ScreenshotNotFoundError(Exception):
    name: str


__all__ = ["InvalidScreenshotError", "RateLimitError", "ScreenshotNotFoundError"]
