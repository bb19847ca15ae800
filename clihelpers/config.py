"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Cap applied to generated and expanded paths (PATH_MAX on Linux)
    path_max: int = 4096
    home_env_var: str = "HOME"

    # Permission bits for touch(), still subject to the process umask
    touch_mode: int = 0o666

    # Interactive prompts
    password_prompt: str = "Enter password: "
    username_prompt: str = "Enter username: "

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CLIHELPERS_",
        case_sensitive=False
    )


settings = Settings()
