# -*- coding: utf-8 -*-
"""Centralized error message mapper.

Controllers never let exceptions escape; they pass them through one of the
map_* functions below and store the resulting message in their state.
"""

from services.translation_manager import tr
from services.exceptions import (
    ApiException,
    BusinessRuleException,
    EnvelopeException,
    NetworkException,
    SessionRequiredException,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def map_status_error(error: ApiException, not_found_key: str = "error.api.not_found") -> str:
    """Map a non-2xx response on a read to a message by status code."""
    status = error.status_code or 0

    if status == 404:
        return tr(not_found_key)
    if status == 401:
        return tr("error.api.unauthorized")
    if status == 403:
        return tr("error.api.forbidden")
    if status >= 500:
        return tr("error.api.server")

    # Other statuses: structured message from the body, else status-coded text
    if error.server_message:
        return error.server_message
    return tr("error.api.http_status", status=status)


def map_envelope_error(error: EnvelopeException) -> str:
    """Map a 2xx response whose envelope reports a failure."""
    if error.malformed:
        logger.warning(f"Malformed envelope: {error.message}")
        return tr("error.api.invalid_response")
    return error.message or tr("error.api.load_failed")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else error.message
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_read_error(error: Exception, not_found_key: str = "error.api.not_found") -> str:
    """Map any failure of a list/detail fetch to a single message."""
    if isinstance(error, SessionRequiredException):
        return tr("error.session.missing")
    if isinstance(error, EnvelopeException):
        return map_envelope_error(error)
    if isinstance(error, ApiException):
        return map_status_error(error, not_found_key)
    if isinstance(error, NetworkException):
        return map_network_error(error)

    logger.warning(f"Unexpected error: {error!r}")
    return str(error) or tr("error.api.load_generic")


def map_write_error(error: Exception) -> str:
    """
    Map a failure of a create/update/status/delete call.

    Non-2xx: the body's `message`, else "HTTP error: <status>".
    Network: the caught error's message, else a generic default.
    """
    if isinstance(error, SessionRequiredException):
        return tr("error.session.missing")
    if isinstance(error, BusinessRuleException):
        return error.message
    if isinstance(error, EnvelopeException):
        if error.malformed:
            return tr("error.api.invalid_response")
        return error.message or tr("error.api.generic")
    if isinstance(error, ApiException):
        if error.server_message:
            return error.server_message
        return tr("error.api.http_status", status=error.status_code or 0)
    if isinstance(error, NetworkException):
        return error.message or tr("error.api.generic")

    logger.warning(f"Unexpected error: {error!r}")
    return str(error) or tr("error.api.generic")
