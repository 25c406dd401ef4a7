"""Runtime configuration for the initialization run queue."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class InitQSettings:
    """Behaviour switches for one run queue.

    By default configuration defects and unresolvable queues raise
    ``QueueFatalError``. With ``defects_are_errors`` they are reported as
    ``QueueConfigError`` / ``QueueUnresolvableError`` instead.
    """

    defects_are_errors: bool = False

    @classmethod
    def from_env(cls) -> InitQSettings:
        """Load settings from environment, defaulting to assertion mode."""

        return cls(
            defects_are_errors=_env_bool("INITQ_DEFECTS_ARE_ERRORS", default=False),
        )


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")
