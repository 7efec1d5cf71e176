"""
Configuration schema for the DeductionService.

Defines the service identity, the engine's geometry parameters, the game's
playing area and logging settings.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

from seekfog_clues.logging import LogEvent, create_logger
from seekfog_clues.schemas import LonLat
from seekfog_zone.config import EngineConfig

logger = create_logger("config")

# Playing-area radius by game size (km)
DEFAULT_PLAY_AREA_RADIUS_KM: Dict[str, float] = {
    "small": 5.0,
    "medium": 15.0,
    "large": 40.0,
}


@dataclass(frozen=True)
class ServiceConfig:
    """
    Main configuration for DeductionService.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    # Service identification
    service_id: str = "local"

    # Geometry parameters for every fold
    engine: EngineConfig = field(default_factory=EngineConfig)

    # Playing area (optional: both or neither)
    game_size: Optional[str] = None
    play_area_center: Optional[Tuple[float, float]] = None
    play_area_radius_km: Dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_PLAY_AREA_RADIUS_KM)
    )

    log_level: str = "INFO"

    def __post_init__(self):
        """Validate service configuration."""
        if not self.service_id:
            raise ValueError("service_id cannot be empty")

        for size, radius_km in self.play_area_radius_km.items():
            if not (math.isfinite(radius_km) and radius_km > 0):
                raise ValueError(
                    f"play_area_radius_km['{size}'] must be > 0, got {radius_km}"
                )

        if self.game_size is not None and self.game_size not in self.play_area_radius_km:
            raise ValueError(
                f"Invalid game_size: {self.game_size}. "
                f"Must be one of {sorted(self.play_area_radius_km)}"
            )

        if (self.game_size is None) != (self.play_area_center is None):
            raise ValueError(
                "game_size and play_area_center must be set together"
            )

        if self.play_area_center is not None:
            # Validates range/finiteness
            LonLat.from_sequence(self.play_area_center)

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Invalid log_level: {self.log_level}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @property
    def play_area(self) -> Optional[Tuple[LonLat, float]]:
        """(center, radius_m) of the playing area, if configured."""
        if self.play_area_center is None:
            return None
        return (
            LonLat.from_sequence(self.play_area_center),
            self.play_area_radius_m(self.game_size),
        )

    def play_area_radius_m(self, size: str) -> float:
        """
        Playing-area radius for a game size.

        Raises:
            ValueError: Unknown size
        """
        if size not in self.play_area_radius_km:
            raise ValueError(
                f"Unknown game size: {size}. "
                f"Must be one of {sorted(self.play_area_radius_km)}"
            )
        return self.play_area_radius_km[size] * 1000.0

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "ServiceConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            service_id: "game-42"

            engine:
              disk_steps: 64
              half_plane_width_m: 100000
              world_bounds: [-180, -90, 180, 90]

            game_size: "medium"
            play_area_center: [-2.7034, 53.7577]   # [lon, lat]

            play_area_radius_km:
              small: 5
              medium: 15
              large: 40

            log_level: "INFO"

        Raises:
            FileNotFoundError: If yaml_path does not exist
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        engine = EngineConfig.from_dict(data.get("engine", {}))

        center_data = data.get("play_area_center")
        play_area_center = tuple(center_data) if center_data is not None else None

        radius_data = data.get("play_area_radius_km", DEFAULT_PLAY_AREA_RADIUS_KM)
        play_area_radius_km = {str(k): float(v) for k, v in radius_data.items()}

        config = cls(
            service_id=str(data.get("service_id", "local")),
            engine=engine,
            game_size=data.get("game_size"),
            play_area_center=play_area_center,
            play_area_radius_km=play_area_radius_km,
            log_level=str(data.get("log_level", "INFO")),
        )
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Service configuration loaded",
            metadata={
                'path': str(yaml_path),
                'service_id': config.service_id,
                'game_size': config.game_size,
            },
        )
        return config
