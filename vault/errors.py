"""Exception types shared by the summarization pipeline and its collaborators."""

from __future__ import annotations


class VaultError(Exception):
    """Base class for all errors raised by the vault package."""


class ConfigError(VaultError, ValueError):
    """Invalid pipeline configuration (chunk size, pacing policy, provider)."""


class ServiceError(VaultError, RuntimeError):
    """A text-generation call failed (network, auth, quota or malformed reply)."""
