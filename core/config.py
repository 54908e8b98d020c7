from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    DATABASE_URL: str = "sqlite+aiosqlite:///./matchmaking.db"
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440

    # Размер пачки кандидатов и коэффициент пересэмплирования сырого запроса
    CANDIDATE_BATCH_SIZE: int = 20
    CANDIDATE_OVERSAMPLE: int = 3
    MAX_CANDIDATE_LIMIT: int = 50

    DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


# Создаём глобальный объект, который будем импортировать везде
settings = Settings()
