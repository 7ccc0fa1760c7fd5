"""Utility modules (host environment, variable expansion)."""

from .environment import (
    HostEnvironment,
    Platform,
    current_platform,
    expand_variables,
)

__all__ = [
    "HostEnvironment",
    "Platform",
    "current_platform",
    "expand_variables",
]
