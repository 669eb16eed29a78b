"""Settings loader helpers for patch-chunk."""

from .loader import (
    LoadError,
    apply_settings,
    load_environment,
    load_settings,
)

__all__ = [
    "LoadError",
    "apply_settings",
    "load_environment",
    "load_settings",
]
