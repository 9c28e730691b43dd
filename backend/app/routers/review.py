"""Field review routes."""

from fastapi import APIRouter

from app.schemas.common import ApiResponse
from app.schemas.review import FieldReviewData, FieldReviewRequest
from app.services.review import build_field_review

router = APIRouter(prefix="/review")


@router.post("/fields", response_model=ApiResponse[FieldReviewData])
def review_fields(payload: FieldReviewRequest) -> ApiResponse[FieldReviewData]:
    """Order and filter deal fields for the review panel."""

    return ApiResponse(
        data=build_field_review(
            payload.fields,
            products=payload.products,
            mode=payload.mode,
            search_query=payload.search_query,
            fields_filter=payload.fields_filter,
        )
    )
