from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    resize_api_url: str = "https://eo3qbo52a7.execute-api.us-east-2.amazonaws.com/dev"
    # Target of the rendered result link; the link text carries the resized image URL
    result_link_href: str = "https://www.google.com"
    request_timeout: Optional[float] = None  # None disables the timeout
    environment: str = "development"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
