# replacement/service/schemas.py

"""Request body schema for the replacement service."""

import logging
from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as SchemaValidationError

from replacement.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class ReplaceRequest(BaseModel):
    """Decoded body of a replacement request.

    Accepts the camelCase wire names as well as the field names. Whether the
    optional fields were supplied is read from ``model_fields_set``, since
    ``null`` is a valid target and replacement.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    payload: Any = Field(..., description="JSON document to process.")

    target_value: Any = Field(
        default=None, alias="targetValue", description="Value to replace."
    )

    replacement_value: Any = Field(
        default=None,
        alias="replacementValue",
        description="Value written in place of each occurrence.",
    )

    max_replacements: Optional[int] = Field(
        default=None,
        alias="maxReplacements",
        description="Maximum number of substitutions. Unlimited if null.",
    )

    @field_validator("max_replacements", mode="before")
    @classmethod
    def reject_boolean_limit(cls, v: Any) -> Any:
        """Booleans are not accepted as counts."""
        if isinstance(v, bool):
            raise ValueError("maxReplacements must be an integer")
        return v

    def has(self, field_name: str) -> bool:
        """Returns True if the request body supplied ``field_name``."""
        return field_name in self.model_fields_set


def parse_request(body: Mapping[str, Any]) -> ReplaceRequest:
    """Validates a decoded request body.

    Args:
        body: Decoded JSON request body

    Returns:
        Validated ReplaceRequest

    Raises:
        ValidationError: If the body is not a mapping or fails validation.
    """
    if not isinstance(body, Mapping):
        raise ValidationError("Invalid request body")

    if "payload" not in body:
        raise ValidationError("payload is required")

    try:
        return ReplaceRequest.model_validate(dict(body))
    except SchemaValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        logger.warning(
            "Request body failed validation", extra={"error_count": e.error_count()}
        )
        raise ValidationError(f"Invalid request: {problems}") from e
