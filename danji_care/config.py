"""Configuration management for danji-care."""

from dataclasses import dataclass, field
from pathlib import Path

from danji_care.exceptions import ConfigurationError
from danji_care.geo.directory import HUNTER_MAP_CENTER
from danji_care.models import GeoPoint
from danji_care.storage.backends import JsonFileStorage, MemoryStorage, StorageBackend


@dataclass
class StorageConfig:
    """Local store configuration."""

    backend: str = "json"
    data_dir: Path = field(default_factory=lambda: Path("local"))

    def create_backend(self) -> StorageBackend:
        """Build the configured storage backend."""
        if self.backend == "json":
            return JsonFileStorage(self.data_dir)
        if self.backend == "memory":
            return MemoryStorage()
        raise ConfigurationError(f"Unknown storage backend: {self.backend!r}")


@dataclass
class MapConfig:
    """Planner map configuration."""

    radius_km: float = 3.0
    horizon_days: int = 60
    center_lat: float = HUNTER_MAP_CENTER.lat
    center_lng: float = HUNTER_MAP_CENTER.lng
    zoom: int = 5

    @property
    def radius_m(self) -> float:
        """Geofence radius in meters."""
        return self.radius_km * 1000

    @property
    def center(self) -> GeoPoint:
        """Map center used until the planner's position is known."""
        return GeoPoint(self.center_lat, self.center_lng)


@dataclass
class GeolocationConfig:
    """Position acquisition limits."""

    timeout_seconds: float = 10.0
    maximum_age_seconds: float = 60.0


@dataclass
class IntakeConfig:
    """Client intake configuration."""

    default_apartment_name: str = "우리 단지"
    request_page_size: int = 5


@dataclass
class DanjiCareConfig:
    """Main configuration for danji-care."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    map: MapConfig = field(default_factory=MapConfig)
    geolocation: GeolocationConfig = field(default_factory=GeolocationConfig)
    intake: IntakeConfig = field(default_factory=IntakeConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DanjiCareConfig":
        """Create config from environment variables."""
        import os

        try:
            storage = StorageConfig(
                backend=os.getenv("DANJI_STORAGE_BACKEND", "json"),
                data_dir=Path(os.getenv("DANJI_DATA_DIR", "local")),
            )

            map_config = MapConfig(
                radius_km=float(os.getenv("DANJI_RADIUS_KM", "3")),
                horizon_days=int(os.getenv("DANJI_HORIZON_DAYS", "60")),
                center_lat=float(os.getenv("DANJI_CENTER_LAT", str(HUNTER_MAP_CENTER.lat))),
                center_lng=float(os.getenv("DANJI_CENTER_LNG", str(HUNTER_MAP_CENTER.lng))),
            )

            geolocation = GeolocationConfig(
                timeout_seconds=float(os.getenv("DANJI_GEO_TIMEOUT", "10")),
                maximum_age_seconds=float(os.getenv("DANJI_GEO_MAX_AGE", "60")),
            )

            seed = int(os.getenv("DANJI_SEED")) if os.getenv("DANJI_SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from exc

        return cls(
            storage=storage,
            map=map_config,
            geolocation=geolocation,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
