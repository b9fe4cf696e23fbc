from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Refuse webhook deliveries that resolve to private/reserved addresses
    webhook_ssrf_protection: bool = True

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
