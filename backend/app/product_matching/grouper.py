"""Greedy similarity grouping of deal line items."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Callable, Generic, Literal, Sequence, TypeVar

from app.product_matching.normalizer import ProductNameNormalizer, get_default_normalizer
from app.product_matching.tokens import token_similarity
from app.schemas.products import Product


logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.85
GroupingMode = Literal["seed", "transitive"]
GROUPING_MODES: tuple[str, ...] = ("seed", "transitive")

T = TypeVar("T")


def product_display_name(product: Product) -> str:
    """Name used for matching: extracted, then CRM, then user override."""

    name = product.product_name
    return name.extracted_value or name.crm_value or name.value or ""


class ProductGrouper(Generic[T]):
    """Partition items into groups of names that refer to the same product.

    In ``seed`` mode each candidate is compared with the group's first member
    only. ``transitive`` mode also compares candidates against every member
    added so far, so A~B~C chains merge into one group.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_THRESHOLD,
        *,
        mode: GroupingMode = "seed",
        normalizer: ProductNameNormalizer | None = None,
        isolate_empty_names: bool = True,
        name_getter: Callable[[T], str] = product_display_name,
    ) -> None:
        if mode not in GROUPING_MODES:
            raise ValueError(f"Unknown grouping mode: {mode}")
        self.threshold = threshold
        self.mode = mode
        self.normalizer = normalizer or get_default_normalizer()
        self.isolate_empty_names = isolate_empty_names
        self.name_getter = name_getter

    def group(self, products: Sequence[T]) -> list[list[T]]:
        started = perf_counter()
        names = [self.name_getter(product) for product in products]
        isolated = [
            self.isolate_empty_names and not name.strip()
            for name in names
        ]
        used = [False] * len(products)
        groups: list[list[T]] = []

        for seed_index, product in enumerate(products):
            if used[seed_index]:
                continue
            used[seed_index] = True
            member_indexes = [seed_index]

            if not isolated[seed_index]:
                anchor_position = 0
                while anchor_position < len(member_indexes):
                    anchor_name = names[member_indexes[anchor_position]]
                    for candidate_index in range(seed_index + 1, len(products)):
                        if used[candidate_index] or isolated[candidate_index]:
                            continue
                        score = token_similarity(
                            anchor_name,
                            names[candidate_index],
                            normalizer=self.normalizer,
                        )
                        if score >= self.threshold:
                            used[candidate_index] = True
                            member_indexes.append(candidate_index)
                    if self.mode == "seed":
                        break
                    anchor_position += 1

            groups.append([products[index] for index in member_indexes])

        logger.info(
            "product_matching.grouping_completed products=%d groups=%d threshold=%.2f mode=%s elapsed_ms=%.2f",
            len(products),
            len(groups),
            self.threshold,
            self.mode,
            (perf_counter() - started) * 1000.0,
        )
        return groups


def group_products_by_similarity(
    products: Sequence[Product],
    threshold: float = DEFAULT_THRESHOLD,
    *,
    mode: GroupingMode = "seed",
    normalizer: ProductNameNormalizer | None = None,
    isolate_empty_names: bool = True,
) -> list[list[Product]]:
    """Group line items whose names refer to the same product."""

    grouper: ProductGrouper[Product] = ProductGrouper(
        threshold,
        mode=mode,
        normalizer=normalizer,
        isolate_empty_names=isolate_empty_names,
    )
    return grouper.group(products)
