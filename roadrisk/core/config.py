"""
Core configuration for RoadRisk.

Loads settings from environment variables with Pydantic validation.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ─────────────────────────────────────────────────────────────
    # Application
    # ─────────────────────────────────────────────────────────────
    ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ─────────────────────────────────────────────────────────────
    # Zone membership
    # ─────────────────────────────────────────────────────────────
    # Classification thresholds were tuned against the planar approximation
    ZONE_RADIUS_KM: float = 2.0
    KM_PER_DEGREE_LAT: float = 111.0
    KM_PER_DEGREE_LNG: float = 85.0
    DISTANCE_METHOD: str = "planar"  # planar | haversine

    # ─────────────────────────────────────────────────────────────
    # Spatial index
    # ─────────────────────────────────────────────────────────────
    SPATIAL_INDEX_MIN_INCIDENTS: int = 500
    SPATIAL_INDEX_CELL_DEGREES: float = 0.02

    # ─────────────────────────────────────────────────────────────
    # Zone catalog
    # ─────────────────────────────────────────────────────────────
    ZONE_CATALOG_PATH: str | None = None  # Falls back to the built-in catalog

    @field_validator(
        "ZONE_RADIUS_KM",
        "KM_PER_DEGREE_LAT",
        "KM_PER_DEGREE_LNG",
        "SPATIAL_INDEX_CELL_DEGREES",
    )
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be greater than zero")
        return value

    @field_validator("DISTANCE_METHOD")
    @classmethod
    def _known_method(cls, value: str) -> str:
        method = value.strip().lower()
        if method not in ("planar", "haversine"):
            raise ValueError(f"unknown distance method '{value}'")
        return method

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENV.lower() == "production"


# Global settings instance
settings = Settings()
