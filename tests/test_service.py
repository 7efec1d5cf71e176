"""
Tests for DeductionService: history buffer, recompute and listeners.
"""

import pytest

from seekfog_clues.logging import StructuredLogger
from seekfog_processor import DeductionService, ServiceConfig


@pytest.fixture
def service():
    return DeductionService()


class TestHistory:

    def test_starts_unconstrained(self, service):
        result = service.current()
        assert result.region.is_unconstrained
        assert result.mask is None
        assert service.history() == []

    def test_submit_recomputes(self, service, proximity):
        result = service.submit(proximity("q1", 1))
        assert result.region.is_bounded
        assert result.mask is not None
        assert service.current() is result

    def test_same_id_replaces(self, service, proximity):
        service.submit(proximity("q1", 1, outcome=True))
        result = service.submit(proximity("q1", 1, outcome=False))
        assert len(service.history()) == 1
        assert result.region.area > 1000.0  # world minus disk

    def test_history_is_in_fold_order(self, service, proximity):
        service.submit_many([proximity("c", 3), proximity("a", 1), proximity("b", 1)])
        assert [clue.id for clue in service.history()] == ["a", "b", "c"]

    def test_retract(self, service, proximity):
        service.submit(proximity("q1", 1, center=(0.0, 0.0)))
        assert service.submit(proximity("q2", 2, center=(1.0, 1.0))).is_contradiction

        result = service.retract("q2")
        assert not result.is_contradiction
        assert result.region.is_bounded

    def test_retract_unknown(self, service):
        with pytest.raises(KeyError):
            service.retract("nope")

    def test_clear(self, service, proximity):
        service.submit(proximity("q1", 1))
        result = service.clear()
        assert result.region.is_unconstrained
        assert result.mask is None
        assert service.history() == []

    def test_replace_history(self, service, proximity, comparative):
        service.submit(proximity("old", 1))
        service.replace_history([comparative("q1", 1), comparative("q2", 2, outcome=False)])
        assert [clue.id for clue in service.history()] == ["q1", "q2"]

    def test_malformed_clue_is_reported(self, service, proximity):
        from seekfog_clues.schemas import Clue, ClueKind

        bad = Clue(id="bad", kind=ClueKind.PROXIMITY, outcome=True, sequence=2, params={})
        result = service.submit_many([proximity("q1", 1), bad])
        assert result.skipped == ("bad",)
        assert result.applied == ("q1",)

    def test_load_records(self, service):
        rows = [
            {
                'id': "r1", 'category': "radar", 'status': "answered",
                'params': {'center': [0.0, 0.0], 'radius': 1000},
                'answer_text': "YES", 'created_at': "2026-03-01T12:00:00Z",
            },
            {
                'id': "r2", 'category': "radar", 'status': "pending",
                'params': {'center': [5.0, 5.0], 'radius': 1000},
                'answer_text': None, 'created_at': "2026-03-01T12:05:00Z",
            },
        ]
        result = service.load_records(rows)
        assert [clue.id for clue in service.history()] == ["r1"]
        assert result.applied == ("r1",)

    def test_load_records_survives_bad_params(self, service):
        rows = [
            {
                'id': "ok", 'category': "radar", 'status': "answered",
                'params': {'center': [0.0, 0.0], 'radius': 1000},
                'answer_text': "YES", 'created_at': "2026-03-01T12:00:00Z",
            },
            {
                'id': "bad", 'category': "radar", 'status': "answered",
                'params': [1, 2],
                'answer_text': "YES", 'created_at': "2026-03-01T12:01:00Z",
            },
        ]
        result = service.load_records(rows)
        assert [clue.id for clue in service.history()] == ["ok"]
        assert result.region.is_bounded


class TestListeners:

    def test_notified_on_every_change(self, service, proximity):
        seen = []
        service.subscribe(seen.append)

        service.submit(proximity("q1", 1))
        service.retract("q1")

        assert len(seen) == 2
        assert seen[0].region.is_bounded
        assert seen[1].region.is_unconstrained

    def test_unsubscribe(self, service, proximity):
        seen = []
        unsubscribe = service.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        service.submit(proximity("q1", 1))
        assert seen == []

    def test_failing_listener_does_not_block_others(self, service, proximity):
        seen = []

        def broken(result):
            raise RuntimeError("renderer gone")

        service.subscribe(broken)
        service.subscribe(seen.append)

        result = service.submit(proximity("q1", 1))
        assert seen == [result]


class TestPlayArea:

    def test_none_without_play_area(self, service):
        assert service.play_area_mask() is None

    def test_mask_with_play_area(self):
        config = ServiceConfig(game_size="small", play_area_center=(-2.7034, 53.7577))
        polygon = DeductionService(config).play_area_mask()
        assert len(polygon.interiors) == 1
        assert polygon.exterior.is_ccw


class TestLogging:

    def test_custom_logger(self, proximity):
        logger = StructuredLogger("test-service")
        service = DeductionService(logger=logger)
        assert service.logger is logger
        service.submit(proximity("q1", 1))

    def test_history_update_is_logged(self, service, proximity, caplog):
        with caplog.at_level("INFO", logger="seekfog.service"):
            service.submit(proximity("q1", 1))
        assert any("history.updated" in record.getMessage() for record in caplog.records)


class TestOverlays:

    def test_uses_engine_line_length(self, comparative):
        from seekfog_zone.config import EngineConfig

        config = ServiceConfig(engine=EngineConfig(bisector_line_half_length_m=500.0))
        service = DeductionService(config)
        service.submit(comparative("q1", 1))
        (line, *_) = service.bisector_overlays()['features']
        (lon0, _), (lon1, _) = line['geometry']['coordinates']
        assert abs(lon1 - lon0) == pytest.approx(2 * 500.0 / 111320.0, rel=1e-3)

    def test_empty_history(self, service):
        assert service.bisector_overlays() == {'type': 'FeatureCollection', 'features': []}
