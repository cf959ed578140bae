# app/config/settings.py

from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    ATTEMPTS_PER_ROUND: int = Field(10, ge=1)
    REPAIR_ITERATIONS: int = Field(20, ge=0)
    PARTNER_RETRIES: int = Field(10, ge=0)
    # defaults for callers that leave members/rounds blank
    DEFAULT_MEMBERS: int = Field(54, ge=3)
    DEFAULT_ROUNDS: int = Field(3, ge=1)
    # request caps for the HTTP surface
    MAX_MEMBERS: int = 1000
    MAX_ROUNDS: int = 50

    class Config:
        env_file = ".env"

settings = Settings()
