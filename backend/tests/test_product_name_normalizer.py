"""Unit tests for product name prefix stripping and cleanup."""

import re
import unittest

from app.product_matching.normalizer import ProductNameNormalizer, normalize_product_name


class ProductNameNormalizerTests(unittest.TestCase):
    def test_source_prefix_is_removed(self) -> None:
        self.assertEqual(
            normalize_product_name("G2 Content: Regional Content Subscription"),
            "regional content subscription",
        )

    def test_vendor_prefix_is_case_insensitive_and_allows_colon(self) -> None:
        self.assertEqual(normalize_product_name("Microsoft: Office 365"), "office 365")
        self.assertEqual(normalize_product_name("adobe creative cloud"), "creative cloud")

    def test_generic_two_word_company_prefix(self) -> None:
        self.assertEqual(normalize_product_name("Acme Corp: Widget Pro"), "widget pro")

    def test_generic_single_word_prefix_is_lossy(self) -> None:
        self.assertEqual(normalize_product_name("Regional Content Subscription"), "content subscription")

    def test_only_one_prefix_is_removed(self) -> None:
        self.assertEqual(normalize_product_name("Microsoft Adobe Reader"), "adobe reader")

    def test_punctuation_and_whitespace_cleanup(self) -> None:
        self.assertEqual(
            normalize_product_name("  premium   support - annual!!  "),
            "premium support annual",
        )

    def test_empty_and_blank_names(self) -> None:
        self.assertEqual(normalize_product_name(""), "")
        self.assertEqual(normalize_product_name("   "), "")
        self.assertEqual(normalize_product_name("G2 Content:"), "")

    def test_injected_rules_replace_defaults(self) -> None:
        normalizer = ProductNameNormalizer([r"^ACME\s+", re.compile(r"^Contoso:\s*")])

        self.assertEqual(normalizer.normalize("ACME Widget"), "widget")
        self.assertEqual(normalizer.normalize("Contoso: Widget"), "widget")
        self.assertEqual(normalizer.normalize("Regional Content"), "regional content")

    def test_empty_rule_list_only_cleans(self) -> None:
        normalizer = ProductNameNormalizer([])

        self.assertEqual(normalizer.normalize("G2 Content: Social Asset Creation"), "g2 content social asset creation")


if __name__ == "__main__":
    unittest.main()
