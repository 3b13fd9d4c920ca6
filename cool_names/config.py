"""
Configuration settings for the name service.
Environment variables (COOL_NAMES_<FIELD>) override defaults.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

PROJ_ROOT = Path(__file__).resolve().parents[1]

STATIC_DIR = PROJ_ROOT / "static"

ENV_PREFIX = "COOL_NAMES_"


@dataclass
class Settings:
    """Service configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3002
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Word lists
    ADJECTIVES_FILE: str = str(STATIC_DIR / "adjectives.txt")
    NOUNS_FILE: str = str(STATIC_DIR / "nouns.txt")

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(ENV_PREFIX + key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, [item.strip() for item in env_value.split(",") if item.strip()])
                else:
                    setattr(self, key, env_value)


# Global settings instance
settings = Settings()
