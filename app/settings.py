from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Memo Service"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    # Vite's default dev server port is 5173
    cors_origins: list[str] = ["http://localhost:5173"]
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
