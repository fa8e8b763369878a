"""Error types for whirlwind operations."""
from __future__ import annotations

from dataclasses import dataclass, field

INTERACTION_FAILED = "InteractionFailed"


@dataclass(frozen=True)
class WhirlwindError:
    """Structured error for a failed whirlwind operation."""

    operation: str
    error_type: str
    message: str
    context: dict[str, object] = field(default_factory=dict)

    def __str__(self) -> str:
        """Detailed form for ``whirlwind --verbose``."""
        max_len = 500
        base = f"[{self.operation}] {self.error_type}: {self.message}"
        if self.context:
            ctx_str = str(self.context)
            if len(ctx_str) > max_len:
                ctx_str = ctx_str[: max_len - 3] + "..."
            base += f" | context={ctx_str}"
        return base
