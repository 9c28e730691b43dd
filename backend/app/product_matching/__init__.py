"""Product line-item matching package."""

from app.product_matching.grouper import (
    DEFAULT_THRESHOLD,
    GROUPING_MODES,
    ProductGrouper,
    group_products_by_similarity,
    product_display_name,
)
from app.product_matching.normalizer import (
    DEFAULT_PREFIX_PATTERNS,
    ProductNameNormalizer,
    normalize_product_name,
)
from app.product_matching.similarity import jaro_winkler_similarity
from app.product_matching.tokens import (
    DESCRIPTOR_GROUPS,
    NameComparison,
    compare_product_names,
    find_conflicting_descriptors,
    token_similarity,
)

__all__ = [
    "DEFAULT_PREFIX_PATTERNS",
    "DEFAULT_THRESHOLD",
    "DESCRIPTOR_GROUPS",
    "GROUPING_MODES",
    "NameComparison",
    "ProductGrouper",
    "ProductNameNormalizer",
    "compare_product_names",
    "find_conflicting_descriptors",
    "group_products_by_similarity",
    "jaro_winkler_similarity",
    "normalize_product_name",
    "product_display_name",
    "token_similarity",
]
