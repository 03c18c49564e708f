# powerplant/core/config.py
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False


class ApiPrefix(BaseModel):
    # battery endpoints are served from the root: /battery/...
    prefix: str = ""
    battery: str = "/battery"


class DatabaseConfig(BaseModel):
    url: str = "sqlite+aiosqlite:///./powerplant.db"
    echo: bool = False
    echo_pool: bool = False
    # pool options are ignored for sqlite urls
    pool_size: int = 50
    max_overflow: int = 10
    # Alembic owns the schema; enable for local runs without migrations
    create_all: bool = False

    naming_convention: dict[str, str] = {
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class BatteryConfig(BaseModel):
    # bulk create skips the postcode uniqueness check unless this is set
    enforce_bulk_uniqueness: bool = False


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_nested_delimiter="__",
        env_prefix="APP_CONFIG__",
        extra="ignore",
    )
    run: RunConfig = RunConfig()
    api: ApiPrefix = ApiPrefix()
    db: DatabaseConfig = DatabaseConfig()
    battery: BatteryConfig = BatteryConfig()


settings = Settings()
