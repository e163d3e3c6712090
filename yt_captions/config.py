from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # HTTP
    HTTP_TIMEOUT: float = 8.0
    USER_AGENT: str = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"

    # Language Settings
    TRANSCRIPT_LANGS: str = "pt,en"

    # System Settings
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", 
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def preferred_languages(self) -> list:
        return [lang.strip() for lang in self.TRANSCRIPT_LANGS.split(",") if lang.strip()]

settings = Settings()
