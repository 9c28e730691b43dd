"""Product name normalization with ordered vendor/source prefix rules."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Pattern


logger = logging.getLogger(__name__)

_VENDOR_PREFIXES: tuple[str, ...] = (
    "Microsoft",
    "Adobe",
    "Salesforce",
    "Oracle",
    "SAP",
    "IBM",
    "Amazon",
    "Google",
    "Apple",
)

DEFAULT_PREFIX_PATTERNS: tuple[Pattern[str], ...] = (
    re.compile(r"^G2\s+Content:\s*", re.IGNORECASE),
    *(re.compile(rf"^{vendor}:?\s*", re.IGNORECASE) for vendor in _VENDOR_PREFIXES),
    # "Company Name: "
    re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+:\s*"),
    # Single capitalised company name at start
    re.compile(r"^[A-Z][a-z]+\s*"),
)

_PUNCTUATION_RE = re.compile(r"[^A-Za-z0-9_\s]+")
_MULTISPACE_RE = re.compile(r"\s+")


def compile_prefix_patterns(patterns: Iterable[str | Pattern[str]]) -> tuple[Pattern[str], ...]:
    """Compile an ordered prefix rule list; compiled patterns pass through untouched."""

    return tuple(
        pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
        for pattern in patterns
    )


class ProductNameNormalizer:
    """Strip at most one leading vendor/source prefix, then clean punctuation and case."""

    def __init__(self, prefix_patterns: Iterable[str | Pattern[str]] | None = None) -> None:
        if prefix_patterns is None:
            self.prefix_patterns = DEFAULT_PREFIX_PATTERNS
        else:
            self.prefix_patterns = compile_prefix_patterns(prefix_patterns)

    def strip_prefix(self, name: str) -> str:
        """Remove the first prefix rule that changes the trimmed name."""

        stripped = name.strip()
        for pattern in self.prefix_patterns:
            candidate = pattern.sub("", stripped, count=1).strip()
            if candidate != stripped:
                logger.debug(
                    "product_matching.prefix_stripped rule=%s before=%r after=%r",
                    pattern.pattern,
                    stripped,
                    candidate,
                )
                return candidate
        return stripped

    def normalize(self, name: str) -> str:
        without_prefix = self.strip_prefix(name)
        cleaned = _PUNCTUATION_RE.sub(" ", without_prefix.lower())
        return _MULTISPACE_RE.sub(" ", cleaned).strip()


_DEFAULT_NORMALIZER = ProductNameNormalizer()


def get_default_normalizer() -> ProductNameNormalizer:
    return _DEFAULT_NORMALIZER


def normalize_product_name(name: str) -> str:
    """Normalize a product name using the default prefix rules."""

    return _DEFAULT_NORMALIZER.normalize(name)
