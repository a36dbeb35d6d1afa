"""
Keyword field validation.

Every rule is checked so callers can show all problems at once.
"""

from typing import Any, List, Mapping

from court_sentiment.errors import ValidationError

from .schemas import POLARITY_CLASSES

MIN_WEIGHT = 0.1
MAX_WEIGHT = 2.0

ERROR_EMPTY_TEXT = "Keyword text must not be empty"
ERROR_BAD_POLARITY = "Type must be one of: positive, negative, strong_negative"
ERROR_WEIGHT_RANGE = f"Weight must be between {MIN_WEIGHT} and {MAX_WEIGHT}"
ERROR_EMPTY_LANGUAGE = "Language must not be empty"


def _blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def weight_in_range(weight: float) -> bool:
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        return False
    return MIN_WEIGHT <= weight <= MAX_WEIGHT


def collect_keyword_errors(data: Mapping[str, Any]) -> List[str]:
    """
    Check a full keyword payload.

    Args:
        data: Mapping with text, polarity_class, weight (optional), language

    Returns:
        List of violated rules (empty when valid)
    """
    errors: List[str] = []

    if _blank(data.get("text")):
        errors.append(ERROR_EMPTY_TEXT)

    polarity = data.get("polarity_class")
    polarity = getattr(polarity, "value", polarity)
    if polarity not in POLARITY_CLASSES:
        errors.append(ERROR_BAD_POLARITY)

    weight = data.get("weight")
    if weight is not None and not weight_in_range(weight):
        errors.append(ERROR_WEIGHT_RANGE)

    if _blank(data.get("language")):
        errors.append(ERROR_EMPTY_LANGUAGE)

    return errors


def collect_update_errors(fields: Mapping[str, Any]) -> List[str]:
    """Check only the fields present in a partial update."""
    errors: List[str] = []

    if "text" in fields and _blank(fields["text"]):
        errors.append(ERROR_EMPTY_TEXT)

    if "polarity_class" in fields:
        polarity = getattr(fields["polarity_class"], "value", fields["polarity_class"])
        if polarity not in POLARITY_CLASSES:
            errors.append(ERROR_BAD_POLARITY)

    weight = fields.get("weight")
    if weight is not None and not weight_in_range(weight):
        errors.append(ERROR_WEIGHT_RANGE)

    return errors


def validate_keyword_data(data: Mapping[str, Any]) -> None:
    """
    Validate a keyword payload.

    Raises:
        ValidationError: Listing every violated rule
    """
    errors = collect_keyword_errors(data)
    if errors:
        raise ValidationError(errors)
