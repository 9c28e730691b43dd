"""Deal review services: product grouping views and field filtering."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Mapping

from app.config import Settings, get_settings
from app.product_matching.grouper import ProductGrouper, product_display_name
from app.product_matching.normalizer import ProductNameNormalizer
from app.product_matching.tokens import compare_product_names
from app.schemas.products import FieldValue, Product, ReviewStatus
from app.schemas.review import (
    FieldFilterMode,
    FieldReviewData,
    FieldReviewItem,
    GroupingModeName,
    NameComparisonRead,
    ProductGroupingData,
    ProductGroupRead,
)
from app.services.source_info import get_source_info


logger = logging.getLogger(__name__)

DOCUMENT_FIELD_ORDER: tuple[str, ...] = (
    "start_date",
    "end_date",
    "total_contract_value",
    "billing_frequency",
)

_FIELD_LABELS: dict[str, str] = {
    "start_date": "Start Date",
    "end_date": "End Date",
    "billing_frequency": "Billing Frequency",
    "total_contract_value": "Total Contract Value",
    "contract_terms": "Contract Terms",
    "discounts": "Discounts",
    "payment_terms": "Payment Terms",
    "termination_clause": "Termination Clause",
}

PRODUCTS_SECTION_LABEL = "Products"


def display_value(field_value: FieldValue) -> str:
    """Value shown to the reviewer: override first, then extracted, then CRM."""

    if field_value.value:
        return field_value.value
    return field_value.extracted_value or field_value.crm_value or ""


def format_field_name(field_name: str) -> str:
    label = _FIELD_LABELS.get(field_name)
    if label:
        return label
    return " ".join(word[:1].upper() + word[1:] for word in field_name.split("_"))


def _contains(haystack: str | None, needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def product_matches_search(product: Product, query: str) -> bool:
    """Case-insensitive substring match over names, your-product and descriptions."""

    if not query:
        return True
    needle = query.lower()
    candidates = [product.product_name.crm_value, product.product_name.extracted_value]
    if product.your_product is not None:
        candidates.append(product.your_product.value)
    if product.description is not None:
        candidates.extend([product.description.crm_value, product.description.extracted_value])
    return any(_contains(candidate, needle) for candidate in candidates)


def products_status(products: Iterable[Product]) -> ReviewStatus:
    """Roll up review status: any field needing review marks the whole set."""

    for product in products:
        if any(value.status == "needs_review" for value in product.field_values()):
            return "needs_review"
    return "reviewed"


@lru_cache
def _normalizer_for_patterns(patterns: tuple[str, ...]) -> ProductNameNormalizer:
    """Compile one normalizer per distinct configured prefix rule list."""

    return ProductNameNormalizer(patterns)


def build_normalizer(settings: Settings) -> ProductNameNormalizer | None:
    if not settings.product_name_prefix_patterns:
        return None
    return _normalizer_for_patterns(tuple(settings.product_name_prefix_patterns))


def build_product_groups(
    products: list[Product],
    *,
    threshold: float | None = None,
    mode: GroupingModeName | None = None,
    search_query: str = "",
    settings: Settings | None = None,
) -> ProductGroupingData:
    """Group line items by name similarity, then apply the search filter per group."""

    settings = settings or get_settings()
    effective_threshold = settings.product_grouping_threshold if threshold is None else threshold
    effective_mode = mode or settings.product_grouping_mode
    grouper: ProductGrouper[Product] = ProductGrouper(
        effective_threshold,
        mode=effective_mode,
        normalizer=build_normalizer(settings),
        isolate_empty_names=settings.product_grouping_isolate_empty_names,
    )
    groups = grouper.group(products)

    filtered_groups = [
        [product for product in group if product_matches_search(product, search_query)]
        for group in groups
    ]
    filtered_groups = [group for group in filtered_groups if group]
    if search_query:
        logger.debug(
            "review.product_groups_filtered query=%r groups_before=%d groups_after=%d",
            search_query,
            len(groups),
            len(filtered_groups),
        )

    group_reads: list[ProductGroupRead] = []
    for group_index, group in enumerate(filtered_groups):
        title = product_display_name(group[0]) or f"Product Line {group_index + 1}"
        group_reads.append(
            ProductGroupRead(
                title=title,
                item_count=len(group),
                status=products_status(group),
                products=group,
            )
        )

    return ProductGroupingData(
        threshold=effective_threshold,
        mode=effective_mode,
        group_count=len(group_reads),
        groups=group_reads,
    )


def explain_name_comparison(
    name_a: str,
    name_b: str,
    *,
    settings: Settings | None = None,
) -> NameComparisonRead:
    settings = settings or get_settings()
    comparison = compare_product_names(name_a, name_b, normalizer=build_normalizer(settings))
    return NameComparisonRead(
        score=comparison.score,
        reason=comparison.reason,
        normalized_a=comparison.normalized_a,
        normalized_b=comparison.normalized_b,
        tokens_a=comparison.tokens_a,
        tokens_b=comparison.tokens_b,
    )


def order_fields(fields: Mapping[str, FieldValue]) -> list[tuple[str, FieldValue]]:
    """Document-order fields first, then the rest alphabetically."""

    leading = [(name, fields[name]) for name in DOCUMENT_FIELD_ORDER if name in fields]
    trailing = sorted(
        (item for item in fields.items() if item[0] not in DOCUMENT_FIELD_ORDER),
        key=lambda item: item[0],
    )
    return leading + trailing


def _field_matches(
    field_name: str,
    field_value: FieldValue,
    *,
    mode: FieldFilterMode,
    search_query: str,
    fields_filter: list[str],
) -> bool:
    display_name = format_field_name(field_name)

    if mode == "filtered_fields" and display_name not in fields_filter:
        return False

    if search_query:
        needle = search_query.lower()
        searchable = (field_name, display_name, field_value.crm_value, field_value.extracted_value)
        if not any(_contains(candidate, needle) for candidate in searchable):
            return False

    if mode in ("needs_review", "reviewed"):
        return field_value.status == mode
    return True


def filter_fields(
    fields: Iterable[tuple[str, FieldValue]],
    *,
    mode: FieldFilterMode = "all",
    search_query: str = "",
    fields_filter: list[str] | None = None,
) -> list[tuple[str, FieldValue]]:
    fields_filter = fields_filter or []
    return [
        (name, value)
        for name, value in fields
        if _field_matches(
            name,
            value,
            mode=mode,
            search_query=search_query,
            fields_filter=fields_filter,
        )
    ]


def should_show_products(mode: FieldFilterMode, fields_filter: list[str] | None = None) -> bool:
    if mode == "filtered_fields":
        return PRODUCTS_SECTION_LABEL in (fields_filter or [])
    return mode in ("all", "needs_review")


def build_field_review(
    fields: Mapping[str, FieldValue],
    *,
    products: list[Product] | None = None,
    mode: FieldFilterMode = "all",
    search_query: str = "",
    fields_filter: list[str] | None = None,
) -> FieldReviewData:
    """Assemble the ordered, filtered field list for the review panel."""

    visible = filter_fields(
        order_fields(fields),
        mode=mode,
        search_query=search_query,
        fields_filter=fields_filter,
    )
    items = [
        FieldReviewItem(
            name=name,
            display_name=format_field_name(name),
            display_value=display_value(value),
            status=value.status,
            source_info=get_source_info(value),
            field=value,
        )
        for name, value in visible
    ]
    return FieldReviewData(
        fields=items,
        show_products=should_show_products(mode, fields_filter),
        products_status=products_status(products or []),
    )
