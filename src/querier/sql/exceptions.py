"""Errors raised while assembling statements."""

from typing import Any, Dict


class QueryBuildError(Exception):
    """Base class for query construction failures."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "message": str(self),
        }


class UnknownTokenError(QueryBuildError, ValueError):
    """A token outside the closed SQL vocabulary was supplied."""

    def __init__(self, category: str, token: Any):
        self.category = category
        self.token = token
        super().__init__(f"Unknown {category} token: {token!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        data = super().to_dict()
        data.update({"category": self.category, "token": repr(self.token)})
        return data
