"""Request/response schemas for product grouping and field review."""

from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.products import FieldValue, Product, ReviewStatus

GroupingModeName = Literal["seed", "transitive"]
FieldFilterMode = Literal["all", "needs_review", "reviewed", "filtered_fields"]
SourceIcon = Literal["salesforce", "netsuite", "document"]


class SourceInfo(BaseModel):
    """Display label and icon kind for a value's origin."""

    label: str
    icon: SourceIcon


class ProductGroupingRequest(BaseModel):
    """Products to group plus optional overrides of configured defaults."""

    products: list[Product] = Field(default_factory=list)
    threshold: float | None = Field(default=None, ge=0.0, le=1.0)
    mode: GroupingModeName | None = None
    search_query: str = ""


class ProductGroupRead(BaseModel):
    """One group of line items believed to be the same product."""

    title: str
    item_count: int
    status: ReviewStatus
    products: list[Product]


class ProductGroupingData(BaseModel):
    """Grouping response payload."""

    threshold: float
    mode: GroupingModeName
    group_count: int
    groups: list[ProductGroupRead]


class NameComparisonRequest(BaseModel):
    name_a: str
    name_b: str


class NameComparisonRead(BaseModel):
    """Similarity score with the rule that produced it."""

    score: float
    reason: str
    normalized_a: str
    normalized_b: str
    tokens_a: list[str]
    tokens_b: list[str]


class FieldReviewRequest(BaseModel):
    """Deal-level fields to order and filter for the review panel."""

    fields: dict[str, FieldValue] = Field(default_factory=dict)
    products: list[Product] = Field(default_factory=list)
    mode: FieldFilterMode = "all"
    search_query: str = ""
    fields_filter: list[str] = Field(default_factory=list)


class FieldReviewItem(BaseModel):
    name: str
    display_name: str
    display_value: str
    status: ReviewStatus
    source_info: SourceInfo
    field: FieldValue


class FieldReviewData(BaseModel):
    """Review panel payload."""

    fields: list[FieldReviewItem]
    show_products: bool
    products_status: ReviewStatus
