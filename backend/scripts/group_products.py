"""Group deal line items from a JSON file and print the groups.

The input is either a JSON list of products or a deal object with a
``products`` list.

Usage (from repository root):
    python backend/scripts/group_products.py deal.json

Usage (from backend directory):
    python scripts/group_products.py deal.json --threshold 0.9 --mode transitive
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

# Make `app` imports work whether the script is run from repo root or backend/.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from app.schemas.products import Product
from app.services.review import build_product_groups


_PRODUCTS_ADAPTER = TypeAdapter(list[Product])


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse script CLI arguments."""

    parser = argparse.ArgumentParser(description="Group deal line items by product name similarity.")
    parser.add_argument("input", type=Path, help="JSON file with a product list or a deal object")
    parser.add_argument("--threshold", type=float, default=None, help="Similarity cutoff (default: settings)")
    parser.add_argument("--mode", choices=("seed", "transitive"), default=None, help="Grouping mode")
    parser.add_argument("--search", default="", help="Only keep line items matching this text")
    parser.add_argument("--verbose", action="store_true", help="Log every name comparison")
    return parser.parse_args(argv)


def load_products(path: Path) -> list[Product]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = raw.get("products", [])
    return _PRODUCTS_ADAPTER.validate_python(raw)


def main(argv: list[str] | None = None) -> int:
    """Load products, group them and print the result as JSON."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        products = load_products(args.input)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        print(f"Could not load products from {args.input}: {exc}", file=sys.stderr)
        return 1

    data = build_product_groups(
        products,
        threshold=args.threshold,
        mode=args.mode,
        search_query=args.search,
    )
    print(json.dumps(data.model_dump(exclude_none=True), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
