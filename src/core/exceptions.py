"""Exceptions raised outside the service result flow."""


class ServiceException(Exception):
    """Base exception for service layer failures."""

    def __init__(self, detail: str = "Service error"):
        super().__init__(detail)
        self.detail = detail


class UnauthorizedException(ServiceException):
    """Raised by the session guard; answered with a redirect, never a body."""

    def __init__(self, redirect_to: str, detail: str = "Authentication required"):
        super().__init__(detail)
        self.redirect_to = redirect_to


class InvariantError(AssertionError):
    """A required value was missing. Signals a routing or programming defect."""


def invariant(condition, message: str) -> None:
    if not condition:
        raise InvariantError(message)
