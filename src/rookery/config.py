"""Application settings with environment overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppSettings:
    """All user-configurable settings."""

    # Autosave target written before every turn; None disables it
    checkpoint_path: Path | None = Path("checkpoint.board")

    # Terminal board
    use_color: bool = True

    # Logging
    log_level: str = "WARNING"

    # Random moves; None means a fresh unseeded generator
    seed: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``ROOKERY_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()

        if "ROOKERY_CHECKPOINT" in env:
            raw = env["ROOKERY_CHECKPOINT"].strip()
            settings = replace(settings, checkpoint_path=Path(raw) if raw else None)
        if "ROOKERY_COLOR" in env:
            use_color = env["ROOKERY_COLOR"].strip().lower() not in _FALSE_VALUES
            settings = replace(settings, use_color=use_color)
        if "ROOKERY_LOG_LEVEL" in env:
            level = env["ROOKERY_LOG_LEVEL"].strip().upper()
            if level not in LOG_LEVELS:
                raise ValueError(
                    f"ROOKERY_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: "
                    f"{env['ROOKERY_LOG_LEVEL']!r}"
                )
            settings = replace(settings, log_level=level)
        if "ROOKERY_SEED" in env:
            try:
                seed = int(env["ROOKERY_SEED"])
            except ValueError:
                raise ValueError(
                    f"ROOKERY_SEED must be an integer: {env['ROOKERY_SEED']!r}"
                ) from None
            settings = replace(settings, seed=seed)

        return settings
