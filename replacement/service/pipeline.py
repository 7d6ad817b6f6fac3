# replacement/service/pipeline.py

"""Main replacement service pipeline."""

import logging
from typing import Any, Mapping, Optional

from replacement.service.config import settings
from replacement.service.schemas import ReplaceRequest, parse_request
from replacement.engine.replacer import replace_in_json
from replacement.core.loader import DefaultsLoader
from replacement.core.domain import ReplacementResponse
from replacement.logic.matching import kind_of
from replacement.core.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


def _resolve_limit(request: ReplaceRequest) -> Optional[int]:
    """Request limit if supplied, else the configured default (None = unlimited)."""
    if request.has("max_replacements"):
        return request.max_replacements
    return settings.default_max_replacements


def _failed(
    payload: Any, message: str, error: Optional[Exception] = None
) -> ReplacementResponse:
    metadata = {"error": message, "status": "failed"}
    if error is not None:
        metadata["error_type"] = type(error).__name__
    return ReplacementResponse(result=payload, replacement_count=0, metadata=metadata)


def replace_json(body: Mapping[str, Any]) -> ReplacementResponse:
    """Main entry point for JSON value replacement.

    Args:
        body: Decoded request body with ``payload`` and optionally
            ``targetValue``, ``replacementValue`` and ``maxReplacements``

    Returns:
        ReplacementResponse with the rewritten payload and count.
        On failure, returns a response indicating the error safely.
    """
    try:
        request = parse_request(body)
    except ValidationError as e:
        logger.warning(f"Rejected replacement request: {e}")
        return _failed(None, str(e), e)

    payload = request.payload

    try:
        defaults = None
        if not (request.has("target_value") and request.has("replacement_value")):
            defaults = DefaultsLoader.get_instance(settings.defaults_file)

        target = (
            request.target_value
            if request.has("target_value")
            else defaults.target_value
        )
        replacement = (
            request.replacement_value
            if request.has("replacement_value")
            else defaults.replacement_value
        )
        limit = _resolve_limit(request)

        logger.info(
            "Starting replacement request",
            extra={
                "payload_kind": kind_of(payload),
                "max_replacements": limit,
            },
        )

        outcome = replace_in_json(payload, target, replacement, limit)

        logger.info(
            f"Replacement successful: {outcome.replacement_count} values replaced",
            extra={"replacement_count": outcome.replacement_count},
        )

        return ReplacementResponse(
            result=outcome.result,
            replacement_count=outcome.replacement_count,
            metadata={"status": "ok", "max_replacements": limit},
        )

    except ConfigurationError as e:
        # These are known errors, log with context but hide internal details in response
        logger.error(
            f"Known error during replacement: {type(e).__name__}",
            exc_info=True,
            extra={"payload_kind": kind_of(payload)},
        )
        return _failed(
            payload, "The replacement service encountered a processing error.", e
        )

    except Exception:
        # Catch-all for unexpected bugs
        logger.error(
            "Unexpected critical error in replacement pipeline",
            exc_info=True,
            extra={"payload_kind": kind_of(payload)},
        )
        return _failed(payload, "An unexpected system error occurred.")
