"""
Input validation for retrieval and storage boundaries.

Every check raises ValidationError before any external call is made.

Dependencies: docrag.core.exceptions
System role: Shared guard clauses for the retrieval engine
"""

import math
from collections.abc import Sequence

from docrag.core.exceptions import ValidationError


def validate_embedding(vector: Sequence[float], dimension: int, field: str = "embedding") -> None:
    """
    Check a vector has exactly ``dimension`` finite components and a
    non-zero norm. Cosine distance is undefined for a zero vector.

    Raises:
        ValidationError: Wrong length, a NaN/inf component or all zeros
    """
    if len(vector) != dimension:
        raise ValidationError(
            f"Expected {dimension} dimensions, got {len(vector)}",
            field=field,
            details={"expected": dimension, "actual": len(vector)},
        )
    if not all(math.isfinite(value) for value in vector):
        raise ValidationError("Vector contains non-finite values", field=field)
    if not any(vector):
        raise ValidationError("Vector must have a non-zero norm", field=field)


def validate_threshold(threshold: float) -> None:
    """
    Check the similarity threshold lies in [0, 1].

    Raises:
        ValidationError: Threshold outside the closed unit interval or NaN
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValidationError(
            f"Threshold must be between 0 and 1, got {threshold}",
            field="threshold",
        )


def validate_limit(limit: int) -> None:
    """
    Check the result limit is a positive integer.

    Raises:
        ValidationError: limit < 1 or not an integer
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValidationError(f"Limit must be an integer >= 1, got {limit!r}", field="limit")


def validate_query_text(query: str) -> None:
    """
    Check a query has non-whitespace content.

    Raises:
        ValidationError: Empty or blank query
    """
    if not query or not query.strip():
        raise ValidationError("Query must not be empty", field="query")


def validate_search_params(threshold: float, limit: int) -> None:
    """Validate threshold and limit together."""
    validate_threshold(threshold)
    validate_limit(limit)
