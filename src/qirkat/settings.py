"""AppSettings — user-configurable options shared by both front ends."""

from __future__ import annotations

from dataclasses import dataclass, field

from qirkat.engine.search import MAX_DEPTH, SearchLimits

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Interface
    display: bool = False  # Qt window instead of the text interpreter
    command_files: list[str] = field(default_factory=list)

    # Players
    white_manual: bool = True
    black_manual: bool = False
    seed: int | None = None

    # Engine
    engine_depth: int = MAX_DEPTH

    # Diagnostics
    log_level: str = "WARNING"

    def search_limits(self) -> SearchLimits:
        return SearchLimits(max_depth=self.engine_depth)
