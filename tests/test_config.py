"""
Tests for engine and service configuration.
"""

import logging

import pytest

from seekfog_clues.schemas import LonLat
from seekfog_processor.config import DEFAULT_PLAY_AREA_RADIUS_KM, ServiceConfig
from seekfog_zone.config import EngineConfig


class TestEngineConfig:

    def test_defaults(self):
        config = EngineConfig()
        assert config.disk_steps == 64
        assert config.half_plane_width_m == 100_000.0
        assert config.world_bounds == (-180.0, -90.0, 180.0, 90.0)

    def test_world_bounds_normalised_to_tuple(self):
        config = EngineConfig(world_bounds=[-10, -5, 10, 5])
        assert config.world_bounds == (-10.0, -5.0, 10.0, 5.0)

    @pytest.mark.parametrize("kwargs,match", [
        ({'disk_steps': 4}, "disk_steps"),
        ({'disk_steps': 10_000}, "disk_steps"),
        ({'half_plane_width_m': 0}, "half_plane_width_m"),
        ({'half_plane_width_m': float("inf")}, "half_plane_width_m"),
        ({'bisector_line_half_length_m': -1}, "bisector_line_half_length_m"),
        ({'world_bounds': (0, 0, 1)}, "world_bounds"),
        ({'world_bounds': (10, 0, -10, 5)}, "positive extent"),
        ({'area_epsilon': -1e-9}, "area_epsilon"),
    ])
    def test_validation(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            EngineConfig(**kwargs)

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown engine config keys"):
            EngineConfig.from_dict({'disk_step': 32})

    def test_from_dict_empty(self):
        assert EngineConfig.from_dict({}) == EngineConfig()
        assert EngineConfig.from_dict(None) == EngineConfig()

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "engine.yaml"
        path.write_text(
            "disk_steps: 32\n"
            "half_plane_width_m: 50000\n"
            "world_bounds: [-20, -10, 20, 10]\n"
        )
        config = EngineConfig.from_yaml(path)
        assert config.disk_steps == 32
        assert config.half_plane_width_m == 50000
        assert config.world_bounds == (-20.0, -10.0, 20.0, 10.0)


class TestServiceConfig:

    def test_defaults(self):
        config = ServiceConfig()
        assert config.service_id == "local"
        assert config.engine == EngineConfig()
        assert config.play_area is None
        assert config.play_area_radius_km == DEFAULT_PLAY_AREA_RADIUS_KM
        assert config.log_level_value == logging.INFO

    def test_play_area(self):
        config = ServiceConfig(game_size="medium", play_area_center=(-2.7034, 53.7577))
        center, radius_m = config.play_area
        assert center == LonLat(lon=-2.7034, lat=53.7577)
        assert radius_m == 15_000.0

    def test_play_area_radius_m(self):
        config = ServiceConfig()
        assert config.play_area_radius_m("small") == 5_000.0
        assert config.play_area_radius_m("large") == 40_000.0
        with pytest.raises(ValueError, match="Unknown game size"):
            config.play_area_radius_m("huge")

    @pytest.mark.parametrize("kwargs,match", [
        ({'service_id': ""}, "service_id"),
        ({'game_size': "medium"}, "set together"),
        ({'play_area_center': (0.0, 0.0)}, "set together"),
        ({'game_size': "huge", 'play_area_center': (0.0, 0.0)}, "Invalid game_size"),
        ({'game_size': "small", 'play_area_center': (0.0, 100.0)}, "Latitude"),
        ({'play_area_radius_km': {'small': 0}}, "play_area_radius_km"),
        ({'log_level': "LOUD"}, "log_level"),
    ])
    def test_validation(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            ServiceConfig(**kwargs)

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text(
            'service_id: "game-42"\n'
            "engine:\n"
            "  disk_steps: 128\n"
            'game_size: "small"\n'
            "play_area_center: [-2.7034, 53.7577]\n"
            "play_area_radius_km:\n"
            "  small: 3\n"
            "  medium: 10\n"
            'log_level: "debug"\n'
        )
        config = ServiceConfig.from_yaml(path)
        assert config.service_id == "game-42"
        assert config.engine.disk_steps == 128
        assert config.play_area_center == (-2.7034, 53.7577)
        assert config.play_area[1] == 3_000.0
        assert config.log_level_value == logging.DEBUG

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ServiceConfig.from_yaml(path) == ServiceConfig()

    def test_from_yaml_bad_engine_section(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("engine:\n  steps: 12\n")
        with pytest.raises(ValueError, match="Unknown engine config keys"):
            ServiceConfig.from_yaml(path)

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ServiceConfig.from_yaml(tmp_path / "missing.yaml")
