from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "fishledger"
    LOG_LEVEL: str = "INFO"
    CURRENCY_SYMBOL: str = "₹"

    # Transaction form defaults, handed to the engine explicitly per request
    DEFAULT_DEDUCTION_METHOD: str = "B"
    DEFAULT_DEDUCTION_PERCENT: float = 5.00
    DEFAULT_COMMISSION_PERCENT: float = 2.00

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
