"""Unit tests for Jaro-Winkler string similarity."""

import unittest

from app.product_matching.similarity import jaro_winkler_similarity


class JaroWinklerSimilarityTests(unittest.TestCase):
    def test_identical_strings_score_one(self) -> None:
        for value in ("", "a", "subscription", "G2 Content"):
            self.assertEqual(jaro_winkler_similarity(value, value), 1.0)

    def test_empty_side_scores_zero(self) -> None:
        self.assertEqual(jaro_winkler_similarity("", "anything"), 0.0)
        self.assertEqual(jaro_winkler_similarity("anything", ""), 0.0)

    def test_reference_values(self) -> None:
        self.assertAlmostEqual(jaro_winkler_similarity("martha", "marhta"), 0.9611, places=4)
        self.assertAlmostEqual(jaro_winkler_similarity("dwayne", "duane"), 0.84, places=4)

    def test_prefix_bonus_is_capped_at_four_characters(self) -> None:
        # jaro = (7/8 + 7/9 + 1) / 3, prefix "anal" gives the maximum bonus
        jaro = (7 / 8 + 7 / 9 + 1) / 3
        expected = jaro + 0.1 * 4 * (1 - jaro)
        self.assertAlmostEqual(jaro_winkler_similarity("analytix", "analytics"), expected, places=9)

    def test_negative_match_window_scores_zero(self) -> None:
        self.assertEqual(jaro_winkler_similarity("a", "b"), 0.0)

    def test_no_matches_scores_zero(self) -> None:
        self.assertEqual(jaro_winkler_similarity("ab", "ba"), 0.0)
        self.assertEqual(jaro_winkler_similarity("abcd", "wxyz"), 0.0)

    def test_symmetry(self) -> None:
        pairs = [
            ("martha", "marhta"),
            ("dwayne", "duane"),
            ("dixon", "dicksonx"),
            ("content", "package"),
            ("regional", "global"),
        ]
        for left, right in pairs:
            with self.subTest(left=left, right=right):
                self.assertAlmostEqual(
                    jaro_winkler_similarity(left, right),
                    jaro_winkler_similarity(right, left),
                    places=12,
                )

    def test_scores_stay_in_unit_interval(self) -> None:
        for left, right in [("premium", "premier"), ("xl", "large"), ("monthly", "yearly")]:
            score = jaro_winkler_similarity(left, right)
            self.assertGreaterEqual(score, 0.0)
            self.assertLessEqual(score, 1.0)


if __name__ == "__main__":
    unittest.main()
