"""
Tolerant operation result envelope.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class TolerantResult:
    """
    Acknowledgment returned by tolerant operations.

    status is always 200; it acknowledges the call, it does not report
    whether the target user was found.
    """
    message: str
    status: int = 200

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {"status": self.status, "message": self.message}
