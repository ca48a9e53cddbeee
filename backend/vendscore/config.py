from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Completeness gates (minimum rated metrics before a score is produced)
    minimum_rated_metrics: int = 3
    type_specific_minimum_rated: int = 3

    # Decision thresholds, 0-5 scale
    greenlight_threshold: float = 4.0
    watchlist_threshold: float = 3.0

    # Decision thresholds, 0-1 scale (dashboard blend)
    greenlight_threshold_unit: float = 0.75
    watchlist_threshold_unit: float = 0.60

    # Rule that drives recommend(): catalog_weighted | blended_mean | dashboard_60_40
    combination_rule: str = "catalog_weighted"

    def validate_thresholds(self) -> list[str]:
        """Check threshold consistency. Returns list of warnings."""
        warnings = []
        if self.watchlist_threshold > self.greenlight_threshold:
            warnings.append("WATCHLIST_THRESHOLD must not exceed GREENLIGHT_THRESHOLD")
        if not 0.0 <= self.watchlist_threshold <= 5.0 or not 0.0 <= self.greenlight_threshold <= 5.0:
            warnings.append("0-5 thresholds must lie within [0, 5]")
        if self.watchlist_threshold_unit > self.greenlight_threshold_unit:
            warnings.append("WATCHLIST_THRESHOLD_UNIT must not exceed GREENLIGHT_THRESHOLD_UNIT")
        if not 0.0 <= self.watchlist_threshold_unit <= 1.0 or not 0.0 <= self.greenlight_threshold_unit <= 1.0:
            warnings.append("0-1 thresholds must lie within [0, 1]")
        if self.combination_rule not in ("catalog_weighted", "blended_mean", "dashboard_60_40"):
            warnings.append(f"Unknown COMBINATION_RULE '{self.combination_rule}'")
        if self.minimum_rated_metrics < 1 or self.type_specific_minimum_rated < 1:
            warnings.append("Minimum rated counts must be at least 1")
        return warnings


settings = Settings()
