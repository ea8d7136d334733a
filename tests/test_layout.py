"""Tests for laying a word out as particles."""

import numpy as np
import pytest

from wordswarm.layout import glyph_width, layout_word


class TestLayoutWord:

    def test_ab_scenario(self, ab_glyphs, rng):
        particles = layout_word("AB", ab_glyphs, 10, 1000, 500, rng=rng)
        assert len(particles) == 7

        max_width = min(1000 * 0.8, 2 * 10)
        base = (1000 - max_width) / 3 - max_width / 2
        a_parts = [p for p in particles if p.info == "A"]
        b_parts = [p for p in particles if p.info == "B"]
        assert len(a_parts) == 3
        assert len(b_parts) == 4

        # 'A' cells (x, y): (2, 0), (0, 2), (4, 2)
        assert [(p.position.x, p.position.y) for p in a_parts] == [
            pytest.approx((base + 20, 250)),
            pytest.approx((base + 0, 270)),
            pytest.approx((base + 40, 270)),
        ]
        # 'B' is shifted by word_size * glyph width
        shift = 10 * 5
        assert [(p.position.x, p.position.y) for p in b_parts] == [
            pytest.approx((base + shift + 0, 250)),
            pytest.approx((base + shift + 0, 260)),
            pytest.approx((base + shift + 0, 290)),
            pytest.approx((base + shift + 10, 290)),
        ]

    def test_radius_is_half_the_cell(self, ab_glyphs, rng):
        particles = layout_word("AB", ab_glyphs, 12, 1000, 500, rng=rng)
        assert all(p.radius == 6 for p in particles)

    def test_positions_are_reproducible(self, ab_glyphs):
        first = layout_word("ABBA", ab_glyphs, 10, 640, 480, velocity_range=1.0,
                            rng=np.random.default_rng(1))
        second = layout_word("ABBA", ab_glyphs, 10, 640, 480, velocity_range=1.0,
                             rng=np.random.default_rng(2))
        assert [p.position for p in first] == [p.position for p in second]
        assert [p.velocity for p in first] != [p.velocity for p in second]

    def test_velocities_within_range(self, ab_glyphs, rng):
        particles = layout_word("ABABAB", ab_glyphs, 10, 640, 480, velocity_range=0.5, rng=rng)
        for p in particles:
            assert -0.25 <= p.velocity.x <= 0.25
            assert -0.25 <= p.velocity.y <= 0.25

    def test_zero_velocity_range(self, ab_glyphs, rng):
        particles = layout_word("AB", ab_glyphs, 10, 640, 480, velocity_range=0.0, rng=rng)
        assert all(p.velocity.x == 0 and p.velocity.y == 0 for p in particles)

    def test_unknown_characters_are_skipped(self, ab_glyphs, rng):
        particles = layout_word("A?B", ab_glyphs, 10, 1000, 500, rng=rng)
        assert len(particles) == 7
        # 'B' keeps its sequence slot even though '?' drew nothing
        known = layout_word("AB", ab_glyphs, 10, 1000, 500, rng=rng)
        shift_b = min(p.position.x for p in particles if p.info == "B") - \
            min(p.position.x for p in known if p.info == "B")
        max_width_3 = min(800, 30)
        max_width_2 = min(800, 20)
        expected = ((1000 - max_width_3) / 3 - max_width_3 / 2 + 2 * 50) - \
            ((1000 - max_width_2) / 3 - max_width_2 / 2 + 50)
        assert shift_b == pytest.approx(expected)

    def test_trail_settings_copied(self, ab_glyphs, rng):
        particles = layout_word("A", ab_glyphs, 10, 100, 100, rng=rng, tail_length=7, tail_threshold=4)
        assert all(p.tail_length == 7 and p.tail_threshold == 4 for p in particles)


class TestGlyphWidth:

    def test_uses_reference_glyph(self, ab_glyphs):
        assert glyph_width(ab_glyphs) == 5

    def test_without_a(self):
        assert glyph_width({"x": [[1, 0, 1]]}) == 3

    def test_empty_table(self):
        assert glyph_width({}) == 0

    def test_blank_reference_glyph_skipped(self):
        assert glyph_width({"A": [], "B": [[1, 1, 1]]}) == 3

    def test_all_glyphs_blank(self):
        assert glyph_width({"A": [], "B": [[]]}) == 0

    def test_blank_reference_glyph_keeps_letters_apart(self, rng):
        particles = layout_word("BB", {"A": [], "B": [[1, 1, 1]]}, 10, 800, 600, rng=rng)
        xs = [p.position.x for p in particles]
        assert len(particles) == 6
        assert xs[3:] == [pytest.approx(x + 30) for x in xs[:3]]
