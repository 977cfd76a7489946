from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='CONSTANT_TERM_')
    log_level: str = "INFO"
    batch_suffix: str = ".json"
    batch_excluded_names: list[str] = ["package.json"]
    batch_skip_hidden: bool = True


settings = Settings()
