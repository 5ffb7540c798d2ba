"""
Cosine similarity and ranking policy.

Pure functions shared by the in-memory store and tests. The pgvector
store evaluates the same expression in SQL.

Dependencies: numpy
System role: Similarity metric and top-K selection
"""

import math
import uuid
from collections.abc import Iterable, Sequence

import numpy as np


def cosine_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Standard cosine distance: 1 - dot(a, b) / (|a| * |b|).

    Returns NaN when either vector has zero norm, matching pgvector.
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    norm = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if norm == 0.0:
        return math.nan
    return 1.0 - float(np.dot(va, vb)) / norm


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Similarity used for ranking: 1 - cosine_distance(a, b)."""
    return 1.0 - cosine_distance(a, b)


def rank_candidates(
    scored: Iterable[tuple[uuid.UUID, float]],
    threshold: float,
    limit: int,
) -> list[tuple[uuid.UUID, float]]:
    """
    Apply the ranking policy to (chunk_id, similarity) pairs.

    Keeps pairs with similarity strictly above the threshold (NaN never
    qualifies), sorts by similarity descending then chunk id ascending,
    and truncates to ``limit``.
    """
    qualifying = [(chunk_id, score) for chunk_id, score in scored if score > threshold]
    qualifying.sort(key=lambda pair: (-pair[1], pair[0]))
    return qualifying[:limit]
