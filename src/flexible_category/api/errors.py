"""
API Errors.

Usage errors are reported to the caller with a short machine-readable
code and a human-readable message; no partial result accompanies them.
"""

from __future__ import annotations

from typing import Any, Dict


class ApiUsageError(Exception):
    """Raised when a query module is called with invalid parameters."""

    def __init__(self, info: str, code: str) -> None:
        super().__init__(f"{code}: {info}")
        self.info = info
        self.code = code

    def to_dict(self) -> Dict[str, Any]:
        """Error payload as returned to API clients."""
        return {"error": {"code": self.code, "info": self.info}}
