"""
Tests for FeasibleRegion and its boolean operations.
"""

import pytest
from shapely.errors import GEOSException
from shapely.geometry import GeometryCollection, LineString, Polygon, box

from seekfog_clues.schemas import LonLat
from seekfog_zone.geometry import region as region_module
from seekfog_zone.geometry.region import (
    FeasibleRegion,
    RegionState,
    difference,
    intersect,
    polygonal_part,
)
from seekfog_zone.geometry.shapes import disk, world_boundary

ORIGIN = LonLat(lon=0.0, lat=0.0)
UNIT = box(0, 0, 1, 1)


class TestFeasibleRegion:

    def test_states(self):
        assert FeasibleRegion.unconstrained().is_unconstrained
        assert FeasibleRegion.empty().is_empty
        assert FeasibleRegion.bounded(UNIT).is_bounded

    def test_bounded_requires_geometry(self):
        with pytest.raises(ValueError, match="non-empty geometry"):
            FeasibleRegion(state=RegionState.BOUNDED)

    def test_unconstrained_rejects_geometry(self):
        with pytest.raises(ValueError, match="cannot carry"):
            FeasibleRegion(state=RegionState.UNCONSTRAINED, geometry=UNIT)

    def test_degenerate_geometry_collapses_to_empty(self):
        assert FeasibleRegion.bounded(Polygon()).is_empty
        assert FeasibleRegion.bounded(LineString([(0, 0), (1, 1)])).is_empty
        assert FeasibleRegion.bounded(box(0, 0, 1e-7, 1e-7)).is_empty

    def test_contains(self):
        assert FeasibleRegion.unconstrained().contains(ORIGIN)
        assert not FeasibleRegion.empty().contains(ORIGIN)
        bounded = FeasibleRegion.bounded(UNIT)
        assert bounded.contains(LonLat(lon=0.5, lat=0.5))
        assert not bounded.contains(LonLat(lon=2.0, lat=0.5))

    def test_area(self):
        assert FeasibleRegion.unconstrained().area == float("inf")
        assert FeasibleRegion.empty().area == 0.0
        assert FeasibleRegion.bounded(UNIT).area == pytest.approx(1.0)

    def test_equals_within_tolerance(self):
        a = FeasibleRegion.bounded(UNIT)
        b = FeasibleRegion.bounded(box(0, 0, 1, 1 + 1e-12))
        assert a.equals(b)
        assert not a.equals(FeasibleRegion.bounded(box(0, 0, 2, 1)))
        assert not a.equals(FeasibleRegion.empty())
        assert FeasibleRegion.empty().equals(FeasibleRegion.empty())


class TestPolygonalPart:

    def test_drops_lines_from_collections(self):
        mixed = GeometryCollection([UNIT, LineString([(5, 5), (6, 6)])])
        result = polygonal_part(mixed)
        assert result.geom_type == "Polygon"
        assert result.area == pytest.approx(1.0)

    def test_pure_line_is_empty(self):
        assert polygonal_part(LineString([(0, 0), (1, 0)])).is_empty


class TestIntersect:

    def test_from_unconstrained_is_shape(self):
        shape = disk(ORIGIN, 1000.0)
        result = intersect(FeasibleRegion.unconstrained(), shape)
        assert result.is_bounded
        assert result.area == pytest.approx(shape.area, rel=1e-9)

    def test_from_unconstrained_clips_to_world(self):
        result = intersect(FeasibleRegion.unconstrained(), box(170, 0, 190, 10))
        assert result.geometry.bounds[2] == pytest.approx(180.0)

    def test_bounded_overlap(self):
        result = intersect(FeasibleRegion.bounded(UNIT), box(0.5, 0, 1.5, 1))
        assert result.area == pytest.approx(0.5)

    def test_disjoint_is_empty(self):
        result = intersect(FeasibleRegion.bounded(UNIT), box(5, 5, 6, 6))
        assert result.is_empty

    def test_empty_stays_empty(self):
        assert intersect(FeasibleRegion.empty(), UNIT).is_empty

    def test_invalid_shape_is_repaired(self):
        bowtie = Polygon([(0, 0), (1, 1), (1, 0), (0, 1)])
        result = intersect(FeasibleRegion.bounded(box(-1, -1, 2, 2)), bowtie)
        assert result.is_bounded
        assert result.geometry.is_valid

    def test_clipping_failure_is_a_no_op(self, monkeypatch):
        def explode(geometry):
            raise GEOSException("TopologyException: side location conflict")

        monkeypatch.setattr(region_module, "_repair", explode)
        start = FeasibleRegion.bounded(UNIT)
        assert intersect(start, box(0.5, 0, 1.5, 1)) is start


class TestDifference:

    def test_from_unconstrained_uses_world(self):
        shape = disk(ORIGIN, 1000.0)
        result = difference(FeasibleRegion.unconstrained(), shape)
        assert result.is_bounded
        assert result.area == pytest.approx(world_boundary().area - shape.area, rel=1e-12)
        assert not result.contains(ORIGIN)

    def test_bounded(self):
        result = difference(FeasibleRegion.bounded(UNIT), box(0.5, 0, 1.5, 1))
        assert result.area == pytest.approx(0.5)

    def test_covering_shape_empties(self):
        assert difference(FeasibleRegion.bounded(UNIT), box(-1, -1, 2, 2)).is_empty

    def test_empty_shape_changes_nothing(self):
        start = FeasibleRegion.bounded(UNIT)
        assert difference(start, Polygon()).equals(start)

    def test_empty_stays_empty(self):
        assert difference(FeasibleRegion.empty(), UNIT).is_empty

    def test_clipping_failure_is_a_no_op(self, monkeypatch):
        def explode(geometry):
            raise GEOSException("TopologyException")

        monkeypatch.setattr(region_module, "_repair", explode)
        start = FeasibleRegion.unconstrained()
        assert difference(start, UNIT) is start
