import random
import unittest

from minicross.core.models import Word
from minicross.engine.selector import overlap_score, select_words


class FirstChoiceRandom(random.Random):
    """Always seeds with the first entry and adds no jitter."""

    def choice(self, seq):
        return seq[0]

    def random(self) -> float:
        return 0.0


def pool_of(*texts):
    return [Word(text, f"clue for {text.lower()}") for text in texts]


class OverlapScoreTests(unittest.TestCase):
    def test_counts_multiset_intersection(self) -> None:
        self.assertEqual(overlap_score("CAT", "ACT"), 3)
        self.assertEqual(overlap_score("ZEBRA", "GHOST"), 0)
        # The second word's single L is consumed once.
        self.assertEqual(overlap_score("BALL", "LAB"), 3)
        self.assertEqual(overlap_score("LAB", "BALL"), 3)
        self.assertEqual(overlap_score("AAA", "A"), 1)


class WordSelectorTests(unittest.TestCase):
    def test_returns_whole_pool_of_exact_size(self) -> None:
        pool = pool_of("CAT", "DOG", "EMU", "YAK")
        picked = select_words(pool, 4, random.Random(7))
        self.assertEqual(sorted(w.text for w in picked), ["CAT", "DOG", "EMU", "YAK"])
        self.assertEqual(len({w.text for w in picked}), 4)

    def test_exact_size_pool_still_draws_a_random_seed(self) -> None:
        pool = pool_of("CAT", "DOG", "EMU", "YAK")
        first_picks = {select_words(pool, 4, random.Random(seed))[0].text for seed in range(30)}
        self.assertGreater(len(first_picks), 1)

    def test_small_pool_returned_whole(self) -> None:
        pool = pool_of("CAT", "DOG")
        self.assertEqual(select_words(pool, 3, random.Random(1)), pool)

    def test_duplicate_words_collapse(self) -> None:
        pool = pool_of("CAT", "CAT", "DOG", "DOG", "CAT")
        picked = select_words(pool, 3, random.Random(3))
        self.assertEqual(sorted(w.text for w in picked), ["CAT", "DOG"])

    def test_prefers_overlapping_candidates(self) -> None:
        pool = pool_of("CARE", "JUMPY", "RACE", "FLUX", "ACRE")
        picked = select_words(pool, 3, FirstChoiceRandom())
        self.assertEqual([w.text for w in picked], ["CARE", "RACE", "ACRE"])

    def test_no_duplicates_from_larger_pool(self) -> None:
        pool = pool_of("STONE", "NOTES", "TONE", "SET", "ONSET", "TENS", "NEST", "SNOT")
        for seed in range(20):
            picked = select_words(pool, 4, random.Random(seed))
            self.assertEqual(len(picked), 4)
            self.assertEqual(len({w.text for w in picked}), 4)

    def test_seeded_selection_is_repeatable(self) -> None:
        pool = pool_of("STONE", "NOTES", "TONE", "SET", "ONSET", "TENS", "NEST", "SNOT")
        first = select_words(pool, 3, random.Random(42))
        second = select_words(pool, 3, random.Random(42))
        self.assertEqual(first, second)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
