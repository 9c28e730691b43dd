"""Token-level comparison of normalized product names."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from app.product_matching.normalizer import ProductNameNormalizer, get_default_normalizer
from app.product_matching.similarity import jaro_winkler_similarity


logger = logging.getLogger(__name__)

SUBSET_SCORE = 0.95
MAX_TOKEN_COUNT_DIFF = 2

DESCRIPTOR_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"regional", "social", "global", "local", "national", "international"}),
    frozenset({"content", "subscription", "creation", "management", "analytics", "reporting"}),
    frozenset({"basic", "premium", "enterprise", "standard", "professional", "starter"}),
    frozenset({"monthly", "yearly", "annual", "quarterly", "weekly"}),
    frozenset({"small", "medium", "large", "xl", "enterprise"}),
)


@dataclass(slots=True)
class NameComparison:
    """Score plus the decision path taken when comparing two product names."""

    score: float
    reason: str
    normalized_a: str
    normalized_b: str
    tokens_a: list[str]
    tokens_b: list[str]


def tokenize(normalized: str) -> list[str]:
    return sorted(token for token in normalized.split() if token)


def find_conflicting_descriptors(
    tokens_a: Iterable[str],
    tokens_b: Iterable[str],
    groups: Sequence[frozenset[str]] = DESCRIPTOR_GROUPS,
) -> frozenset[str] | None:
    """Return the first descriptor group both sides use with no shared term."""

    set_a = set(tokens_a)
    set_b = set(tokens_b)
    for group in groups:
        found_a = set_a & group
        found_b = set_b & group
        if found_a and found_b and found_a.isdisjoint(found_b):
            return group
    return None


def compare_product_names(
    name_a: str,
    name_b: str,
    *,
    normalizer: ProductNameNormalizer | None = None,
    descriptor_groups: Sequence[frozenset[str]] = DESCRIPTOR_GROUPS,
) -> NameComparison:
    """Compare two raw product names and explain the resulting score."""

    normalizer = normalizer or get_default_normalizer()
    normalized_a = normalizer.normalize(name_a)
    normalized_b = normalizer.normalize(name_b)
    tokens_a = tokenize(normalized_a)
    tokens_b = tokenize(normalized_b)

    def _result(score: float, reason: str) -> NameComparison:
        logger.debug(
            "product_matching.compare a=%r b=%r reason=%s score=%.4f",
            normalized_a,
            normalized_b,
            reason,
            score,
        )
        return NameComparison(
            score=score,
            reason=reason,
            normalized_a=normalized_a,
            normalized_b=normalized_b,
            tokens_a=tokens_a,
            tokens_b=tokens_b,
        )

    if normalized_a == normalized_b:
        return _result(1.0, "exact_normalized")
    if not tokens_a or not tokens_b:
        return _result(0.0, "empty_tokens")

    set_a = set(tokens_a)
    set_b = set(tokens_b)
    if set_a <= set_b or set_b <= set_a:
        return _result(SUBSET_SCORE, "token_subset")

    if abs(len(tokens_a) - len(tokens_b)) > MAX_TOKEN_COUNT_DIFF:
        return _result(0.0, "token_count_mismatch")

    total = 0.0
    for token_a in tokens_a:
        total += max(jaro_winkler_similarity(token_a, token_b) for token_b in tokens_b)
    average = total / len(tokens_a)

    if find_conflicting_descriptors(tokens_a, tokens_b, descriptor_groups) is not None:
        return _result(0.0, "descriptor_conflict")
    return _result(average, "token_average")


def token_similarity(
    name_a: str,
    name_b: str,
    *,
    normalizer: ProductNameNormalizer | None = None,
    descriptor_groups: Sequence[frozenset[str]] = DESCRIPTOR_GROUPS,
) -> float:
    """Return the token-based similarity of two raw product names in [0, 1]."""

    return compare_product_names(
        name_a,
        name_b,
        normalizer=normalizer,
        descriptor_groups=descriptor_groups,
    ).score
