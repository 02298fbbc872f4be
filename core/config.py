from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "SoleRelief"
    env: str = "dev"
    api_prefix: str = "/api"

    # Single-user deployment: every request without a userId belongs to this user.
    default_user_id: str = "default-user"

    # Load the starter exercise library, reminders and profile at startup.
    seed_data: bool = True

    log_level: str = "INFO"

    frontend_origin: str = "http://localhost:5173"


settings = Settings()
