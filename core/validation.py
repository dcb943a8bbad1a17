# =============================================================================
# core/validation.py  —  Argument Validation
# =============================================================================
#
# Runs the caller's arguments through the tool's pydantic model and reports
# ALL problems at once, in the form:
#
#     Invalid arguments: docName: Required; pagePath: Required
#
# Validation is purely structural.  It never asks the remote API whether a
# docName exists; an unknown identifier is rejected by the API's response.
# =============================================================================

from collections.abc import Mapping
from typing import Any

import pydantic

from core.exceptions import ValidationError
from core.schemas import ToolArguments

# pydantic error types that get a shorter, caller-friendly wording
_PROBLEM_TEXT = {
    "missing": "Required",
    "string_too_short": "Must not be empty",
}


def validate_arguments(model: type[ToolArguments], arguments: Any) -> dict[str, Any]:
    """Validate raw tool arguments against a tool's argument model.

    Args:
        model: The tool's argument model.
        arguments: Whatever the caller sent (usually a dict, possibly None).

    Returns:
        A dict holding only the declared fields.  Undeclared keys are dropped.

    Raises:
        ValidationError: listing every missing or malformed field.
    """
    if arguments is None:
        arguments = {}

    if not isinstance(arguments, Mapping):
        # Tools without required fields ignore whatever shape they were sent.
        if not any(f.is_required() for f in model.model_fields.values()):
            return {}
        raise ValidationError(["arguments must be an object"])

    # A null value counts as an absent field.
    present = {k: v for k, v in arguments.items() if v is not None}

    try:
        validated = model.model_validate(present)
    except pydantic.ValidationError as e:
        raise ValidationError([_describe(err) for err in e.errors()]) from e
    return validated.model_dump()


def _describe(err: dict[str, Any]) -> str:
    field = ".".join(str(part) for part in err["loc"]) or "arguments"
    return f"{field}: {_PROBLEM_TEXT.get(err['type'], err['msg'])}"
