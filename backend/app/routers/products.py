"""Product line-item grouping routes."""

from fastapi import APIRouter

from app.schemas.common import ApiResponse
from app.schemas.review import (
    NameComparisonRead,
    NameComparisonRequest,
    ProductGroupingData,
    ProductGroupingRequest,
)
from app.services.review import build_product_groups, explain_name_comparison

router = APIRouter(prefix="/products")


@router.post("/groups", response_model=ApiResponse[ProductGroupingData])
def group_products(payload: ProductGroupingRequest) -> ApiResponse[ProductGroupingData]:
    """Group CRM and document line items that name the same product."""

    return ApiResponse(
        data=build_product_groups(
            payload.products,
            threshold=payload.threshold,
            mode=payload.mode,
            search_query=payload.search_query,
        )
    )


@router.post("/compare", response_model=ApiResponse[NameComparisonRead])
def compare_products(payload: NameComparisonRequest) -> ApiResponse[NameComparisonRead]:
    """Score two product names and report which rule decided the score."""

    return ApiResponse(data=explain_name_comparison(payload.name_a, payload.name_b))
