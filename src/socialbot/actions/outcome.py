from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ActionOutcome:
    """
    Immutable result of a dispatcher operation.

    `error` holds the raw object raised by the navigator and is only set when
    `status` is False.
    """

    status: bool
    error: Optional[Any] = None

    def __post_init__(self) -> None:
        if self.status and self.error is not None:
            raise ValueError("A successful outcome cannot carry an error")

    @classmethod
    def succeeded(cls) -> "ActionOutcome":
        return cls(status=True)

    @classmethod
    def failed(cls, error: Any) -> "ActionOutcome":
        return cls(status=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if self.status:
            return {"status": True}
        return {"status": False, "error": str(self.error)}
