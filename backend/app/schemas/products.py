"""Deal line-item schemas shared by matching and review."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ReviewStatus = Literal["reviewed", "needs_review"]


class FieldValue(BaseModel):
    """One reviewable field with its competing source values."""

    model_config = ConfigDict(extra="ignore")

    crm_value: str | None = None
    extracted_value: str | None = None
    value: str | None = None
    source: str | None = None
    selected_source: str | None = None
    status: ReviewStatus = "needs_review"


class Product(BaseModel):
    """Quote/order line item as seen from CRM and extracted documents."""

    model_config = ConfigDict(extra="ignore")

    line_item_id: str = Field(..., min_length=1)
    product_name: FieldValue
    your_product: FieldValue | None = None
    description: FieldValue | None = None
    unit_price: FieldValue | None = None
    quantity: FieldValue | None = None
    discount: FieldValue | None = None
    total_fees: FieldValue | None = None

    def field_values(self) -> list[FieldValue]:
        """Return the populated field values in declaration order."""

        values: list[FieldValue] = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, FieldValue):
                values.append(value)
        return values
