from datetime import date

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    RPC_URL: str = "https://api.mainnet-beta.solana.com"
    RPC_COMMITMENT: str = "confirmed"
    RPC_TIMEOUT: float = 30
    REDIS_URL: str = ""
    CACHE_EXPIRE_SECONDS: int = 300
    VESTING_TOTAL_AMOUNT: int = 150_000_000_000000
    VESTING_START_DATE: date = date(2021, 12, 14)
    VESTING_END_DATE: date = date(2024, 12, 14)
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app.log"
    HOST: str = "0.0.0.0"
    PORT: int = 9999

settings = Settings()
