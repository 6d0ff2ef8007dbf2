from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "likeme"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "likeme"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_pool_timeout: float = 10.0
    db_command_timeout: float = 30.0
    db_create_schema: bool = False
    posts_table: str = "posts"
    shortener_enabled: bool = True
    shortener_base_url: str = "https://tinyurl.com/api-create.php"
    shortener_timeout: float = 5.0
