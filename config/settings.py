from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "Shuttle Ledger"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Money: significant digits used when a value has no finite decimal expansion
    MONEY_PRECISION: int = 28

    # Session limits
    MAX_SESSION_HOURS: Decimal = Decimal("8")
    MAX_SESSION_PARTICIPANTS: int = 20

    # Default court rates per hour, by court type
    COURT_RATE_INDOOR_PEAK: Decimal = Decimal("50.00")
    COURT_RATE_INDOOR_OFFPEAK: Decimal = Decimal("35.00")
    COURT_RATE_OUTDOOR: Decimal = Decimal("15.00")
    COURT_RATE_COMMUNITY: Decimal = Decimal("25.00")

    # Default shuttlecock rates per unit, by court type
    SHUTTLECOCK_RATE_INDOOR_PEAK: Decimal = Decimal("2.50")
    SHUTTLECOCK_RATE_INDOOR_OFFPEAK: Decimal = Decimal("2.00")
    SHUTTLECOCK_RATE_OUTDOOR: Decimal = Decimal("1.50")
    SHUTTLECOCK_RATE_COMMUNITY: Decimal = Decimal("1.80")

    # Peak windows, HH:MM, half-open [start, end)
    PEAK_MORNING_START: str = "07:00"
    PEAK_MORNING_END: str = "10:00"
    PEAK_EVENING_START: str = "18:00"
    PEAK_EVENING_END: str = "22:00"


settings = Settings()
