from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ConfigUnavailableError(Exception):
    """The configuration file is missing, unreadable or malformed."""

    config_path: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "ok": False,
            "error": {"code": "CONFIG_UNAVAILABLE", "message": self.message, "config_path": self.config_path},
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload
