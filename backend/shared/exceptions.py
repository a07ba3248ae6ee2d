"""
Exception hierarchy shared by every module.

Modules subclass these; the API turns any TiriweError into a JSON body
with the subclass's status_code. The page-load pipeline catches
ServiceUnavailableError where it degrades and lets the rest propagate.
"""

from typing import Optional, Any


class TiriweError(Exception):
    """Root of the hierarchy; `code` defaults to the class name."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(TiriweError):
    status_code = 404


class ValidationError(TiriweError):
    status_code = 422


class AuthenticationError(TiriweError):
    """No usable session for an endpoint that needs one."""

    status_code = 401


class AuthorizationError(TiriweError):
    status_code = 403


class ServiceUnavailableError(TiriweError):
    """
    A remote collaborator failed: identity provider, data store or a
    remote procedure. `service` names which one.
    """

    status_code = 503

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
