from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(eq=False)
class InvalidDirectionError(ValueError):
    direction: Any
    message: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = f"Invalid synchronization direction: {self.direction}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direction": self.direction,
            "message": self.message,
        }
