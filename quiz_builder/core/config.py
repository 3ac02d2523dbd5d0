from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Banco de dados
    DATABASE_URL: str = "sqlite:///./quiz_builder.db"
    SQL_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    # logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]


    class Config:
        env_file = ".env"


settings = Settings()
