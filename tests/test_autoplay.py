from unittest import TestCase, main

from autoplay import autoplay


class TestAutoplay(TestCase):
    def test_plays_every_game_to_the_end(self):
        """Each game contributes one max tile to the frequency table."""
        result = autoplay(length=2, seed=0)
        self.assertEqual(sum(result.values()), 2)
        for tile in result:
            self.assertGreaterEqual(tile, 4)
            self.assertEqual(tile & (tile - 1), 0)


if __name__ == '__main__':
    main()
