"""Source badge classification for reviewable field values."""

from __future__ import annotations

from app.schemas.products import FieldValue
from app.schemas.review import SourceInfo


_DOCUMENT_SOURCES: tuple[tuple[str, str], ...] = (
    ("order form", "Order Form"),
    ("master service agreement", "Master Service Agreement"),
)


def get_source_info(field_value: FieldValue) -> SourceInfo:
    """Classify where a field value came from for display."""

    source = (field_value.source or "").lower()

    if "salesforce" in source or field_value.crm_value:
        return SourceInfo(label="Salesforce", icon="salesforce")
    if "netsuite" in source:
        return SourceInfo(label="NetSuite", icon="netsuite")
    for needle, label in _DOCUMENT_SOURCES:
        if needle in source:
            return SourceInfo(label=label, icon="document")
    return SourceInfo(label=field_value.source or "Document", icon="document")
