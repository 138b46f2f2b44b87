from pathlib import Path
from typing import Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


def _default_about() -> Dict[str, List[str]]:
    return {
        "who": ["developer", "blogger", "minimalist"],
        "what": ["typescript", "full-stack", "aws"],
        "how": ["thorough", "unbiased", "open_minded"],
    }


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    POSTS_DIR: str = "posts"
    OUTPUT_DIR: str = "out"

    # Site
    SITE_TITLE: str = "DarkMannn"
    SITE_DESCRIPTION: str = "Personal blog and portfolio"
    SITE_AUTHOR: str = "Darko Milošević"
    NICKNAME: str = "darkmannn"
    EMAIL: str = "darko.milosevic@darkmannn.dev"
    ABOUT: Dict[str, List[str]] = Field(default_factory=_default_about)

    # Rendering
    PYGMENTS_STYLE: str = "default"
    COPY_FEEDBACK_MS: int = 3000
    BUILD_WORKERS: int = 4

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def output_path(self) -> Path:
        return Path(self.OUTPUT_DIR)

    @property
    def linkedin_url(self) -> str:
        return f"https://www.linkedin.com/in/{self.NICKNAME}"

    @property
    def github_url(self) -> str:
        return f"https://github.com/{self.NICKNAME}"

    @property
    def mailto_url(self) -> str:
        return f"mailto:{self.EMAIL}?subject=Hey {self.NICKNAME}!"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
