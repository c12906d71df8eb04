"""
Application error type.

A single exception class carrying an HTTP-style status code, with
factory classmethods for the common kinds. The data-access layer only
raises the internal-server and bad-request kinds; the others exist for
the service and API layers built on top of it.
"""

from typing import Optional


class CustomError(Exception):
    """
    Typed application error.

    Attributes:
        status_code: HTTP-style status code describing the error kind
        message: Human readable description
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @classmethod
    def bad_request(cls, message: str = "Bad Request") -> "CustomError":
        return cls(400, message)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized") -> "CustomError":
        return cls(401, message)

    @classmethod
    def forbidden(cls, message: str = "Forbidden") -> "CustomError":
        return cls(403, message)

    @classmethod
    def not_found(cls, message: str = "Not Found") -> "CustomError":
        return cls(404, message)

    @classmethod
    def internal_server(cls, message: Optional[str] = None) -> "CustomError":
        return cls(500, message or "Internal Server Error")

    @property
    def is_internal(self) -> bool:
        return self.status_code >= 500

    def __repr__(self) -> str:
        return f"CustomError(status_code={self.status_code}, message={self.message!r})"
