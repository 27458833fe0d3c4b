# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for non-2xx API responses."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    @property
    def server_message(self) -> str:
        """Structured `message` from the response body, if the server sent one."""
        if isinstance(self.response_data, dict):
            message = self.response_data.get("message")
            if isinstance(message, str) and message.strip():
                return message
        return ""

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class EnvelopeException(ApiException):
    """
    Raised when the transport succeeded (2xx) but the {status, message, data}
    envelope reports a failure, or is not an envelope at all.
    """

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None,
                 malformed: bool = False):
        super().__init__(message, status_code=status_code,
                         response_data=response_data, context=context)
        self.malformed = malformed


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class SessionRequiredException(Exception):
    """Raised when a request needs a bearer credential and none is available."""

    def __init__(self, message: str = "Not authenticated", context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context


class BusinessRuleException(Exception):
    """Raised when a business invariant forbids an operation locally."""

    def __init__(self, message: str, rule: str = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.rule = rule
        self.context = context

