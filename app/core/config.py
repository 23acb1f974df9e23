from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import computed_field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    app_name: str = "Site Counts"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # DB settings
    db_user: str = "cms"
    db_pass: str = "cms"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "cms"

    # i18n (gettext catalogs: <locale_dir>/<language>/LC_MESSAGES/<domain>.mo)
    language: str = "en"
    locale_dir: Path = Path(__file__).resolve().parents[2] / "locale"

    @computed_field
    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_pass}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

settings = Settings()
