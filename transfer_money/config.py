"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class TransferMoneyConfig(BaseSettings):
    """Transfer money configuration"""

    model_config = SettingsConfigDict(
        env_prefix="TRANSFER_MONEY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # Business rules configuration
    strict_transfers: bool = False  # Raise instead of silently declining

    # Demo scenario
    demo_source_opening_balance: str = "1000"
    demo_destination_opening_balance: str = "100"
    demo_transfer_amount: str = "200"


# Global configuration instance
config = TransferMoneyConfig()


def get_config() -> TransferMoneyConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> TransferMoneyConfig:
    """Reload configuration from environment"""
    global config
    config = TransferMoneyConfig()
    return config
