"""Unit tests for greedy product line-item grouping."""

import unittest

from app.product_matching.grouper import (
    ProductGrouper,
    group_products_by_similarity,
    product_display_name,
)
from app.schemas.products import FieldValue, Product
from deal_fixtures import named_product, review_panel_products


def _ids(groups: list[list[Product]]) -> list[list[str]]:
    return [[product.line_item_id for product in group] for group in groups]


class ProductGrouperTests(unittest.TestCase):
    def test_review_panel_line_items_form_three_groups(self) -> None:
        groups = group_products_by_similarity(review_panel_products(), 0.85)

        self.assertEqual(
            _ids(groups),
            [
                ["li_001_master", "li_001_salesforce"],
                ["li_002_master", "li_002_salesforce"],
                ["li_003_single"],
            ],
        )

    def test_empty_input(self) -> None:
        self.assertEqual(group_products_by_similarity([]), [])

    def test_single_product_forms_singleton_for_any_threshold(self) -> None:
        product = named_product("li_1", "Premium Support Package")
        for threshold in (0.0, 0.5, 0.85, 1.0):
            with self.subTest(threshold=threshold):
                self.assertEqual(group_products_by_similarity([product], threshold), [[product]])

    def test_groups_partition_input(self) -> None:
        products = review_panel_products() + [
            named_product("li_x", "Social Asset Creation"),
            named_product("li_y", None),
            named_product("li_z", "Enterprise Analytics Monthly"),
        ]

        groups = group_products_by_similarity(products)

        flattened = [product.line_item_id for group in groups for product in group]
        self.assertEqual(sum(len(group) for group in groups), len(products))
        self.assertEqual(sorted(flattened), sorted(product.line_item_id for product in products))

    def test_threshold_one_keeps_subset_matches_apart(self) -> None:
        groups = group_products_by_similarity(review_panel_products(), 1.0)

        self.assertEqual(len(groups), 5)

    def test_threshold_zero_merges_everything(self) -> None:
        groups = group_products_by_similarity(review_panel_products(), 0.0)

        self.assertEqual(len(groups), 1)
        self.assertEqual(len(groups[0]), 5)

    def test_seed_mode_does_not_chain_through_members(self) -> None:
        products = [
            named_product("a", "alpha beta"),
            named_product("c", "gamma"),
            named_product("b", "alpha beta gamma"),
        ]

        groups = group_products_by_similarity(products, mode="seed")

        self.assertEqual(_ids(groups), [["a", "b"], ["c"]])

    def test_transitive_mode_chains_through_members(self) -> None:
        products = [
            named_product("a", "alpha beta"),
            named_product("c", "gamma"),
            named_product("b", "alpha beta gamma"),
        ]

        groups = group_products_by_similarity(products, mode="transitive")

        self.assertEqual(_ids(groups), [["a", "b", "c"]])

    def test_unnamed_products_stay_apart_by_default(self) -> None:
        products = [named_product("n1", None), named_product("n2", ""), named_product("n3", "  ")]

        groups = group_products_by_similarity(products)

        self.assertEqual(_ids(groups), [["n1"], ["n2"], ["n3"]])

    def test_single_word_names_still_group_by_default(self) -> None:
        # "Widget" normalizes to "" under the single capitalised word rule
        products = [named_product("crm", "Widget"), named_product("doc", "Widget")]

        groups = group_products_by_similarity(products)

        self.assertEqual(_ids(groups), [["crm", "doc"]])

    def test_unnamed_product_does_not_join_single_word_name(self) -> None:
        products = [named_product("crm", "Widget"), named_product("blank", None)]

        groups = group_products_by_similarity(products)

        self.assertEqual(_ids(groups), [["crm"], ["blank"]])

    def test_unnamed_products_can_merge_when_isolation_disabled(self) -> None:
        products = [named_product("n1", None), named_product("n2", ""), named_product("p", "widget")]

        groups = group_products_by_similarity(products, isolate_empty_names=False)

        self.assertEqual(_ids(groups), [["n1", "n2"], ["p"]])

    def test_duplicate_ids_are_not_dropped(self) -> None:
        products = [named_product("dup", "Premium Support"), named_product("dup", "Regional Content")]

        groups = group_products_by_similarity(products)

        self.assertEqual(sum(len(group) for group in groups), 2)

    def test_custom_name_getter(self) -> None:
        grouper: ProductGrouper[str] = ProductGrouper(name_getter=lambda name: name)

        groups = grouper.group(["Social Asset Creation", "Premium Support", "G2 Content: Social Asset Creation"])

        self.assertEqual(
            groups,
            [["Social Asset Creation", "G2 Content: Social Asset Creation"], ["Premium Support"]],
        )

    def test_unknown_mode_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ProductGrouper(mode="cluster")  # type: ignore[arg-type]


class ProductDisplayNameTests(unittest.TestCase):
    def test_extracted_value_wins(self) -> None:
        product = Product(
            line_item_id="li",
            product_name=FieldValue(extracted_value="Doc Name", crm_value="CRM Name", value="Override"),
        )

        self.assertEqual(product_display_name(product), "Doc Name")

    def test_falls_back_to_crm_then_override(self) -> None:
        crm = Product(line_item_id="a", product_name=FieldValue(crm_value="CRM Name", value="Override"))
        override = Product(line_item_id="b", product_name=FieldValue(value="Override"))
        empty = Product(line_item_id="c", product_name=FieldValue())

        self.assertEqual(product_display_name(crm), "CRM Name")
        self.assertEqual(product_display_name(override), "Override")
        self.assertEqual(product_display_name(empty), "")


if __name__ == "__main__":
    unittest.main()
