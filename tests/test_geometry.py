"""Segment intersection tests."""
import pytest

from hyperroute.algorithms.hypergraph.geometry import (
    COLLINEAR, CLOCKWISE, COUNTER_CLOCKWISE, orientation, segments_intersect
)


class TestOrientation:
    """Orientation of point triplets"""

    def test_collinear(self):
        assert orientation((0, 0), (1, 1), (2, 2)) == COLLINEAR

    def test_turn_directions_differ(self):
        left = orientation((0, 0), (1, 0), (1, 1))
        right = orientation((0, 0), (1, 0), (1, -1))
        assert {left, right} == {CLOCKWISE, COUNTER_CLOCKWISE}


class TestSegmentsIntersect:
    """Segment intersection predicate"""

    def test_proper_crossing(self):
        assert segments_intersect((0, 5), (10, 5), (5, 0), (5, 10))

    def test_parallel_segments(self):
        assert not segments_intersect((0, 2), (10, 2), (0, 8), (10, 8))

    def test_shared_endpoint_counts(self):
        assert segments_intersect((0, 0), (5, 5), (5, 5), (10, 0))

    def test_t_junction_counts(self):
        assert segments_intersect((0, 0), (10, 0), (5, 0), (5, 5))

    def test_collinear_overlap(self):
        assert segments_intersect((0, 0), (6, 0), (4, 0), (10, 0))

    def test_collinear_disjoint(self):
        assert not segments_intersect((0, 0), (3, 0), (4, 0), (10, 0))

    def test_separate_segments(self):
        assert not segments_intersect((0, 0), (1, 1), (3, 0), (4, -2))

    @pytest.mark.parametrize("a,b,c,d", [
        ((0, 5), (10, 5), (5, 0), (5, 10)),
        ((0, 0), (3, 0), (4, 0), (10, 0)),
    ])
    def test_symmetric(self, a, b, c, d):
        assert segments_intersect(a, b, c, d) == segments_intersect(c, d, a, b)
