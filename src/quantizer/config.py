"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class OrderSettings(BaseSettings):
    """Order-entry constraints published by the auction for a deployment."""

    model_config = SettingsConfigDict(env_prefix="ORDER_")

    price_digits_limit: int = 5  # max significant digits in a limit price
    quote_volume_step: Decimal = Decimal("1000")  # notional step, quote smallest units
    quote_volume_minimum: Decimal = Decimal("5000")  # min order notional, quote smallest units


class DisplaySettings(BaseSettings):
    """History table and header widget presentation parameters.

    All fields configurable via DISPLAY_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="DISPLAY_")

    extra_significant_digits: int = 2  # digits shown past the first non-zero decimal
    header_window_days: int = 6  # trailing volume window for the header widget


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    order: OrderSettings = OrderSettings()
    display: DisplaySettings = DisplaySettings()
