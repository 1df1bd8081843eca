# region Docstring
"""
whatdidido.config.factory
Settings base class and cached factory for whatdidido.
Overview:
- FactoryBaseSettings reads values, highest priority first, from init kwargs,
    WHATDIDIDO_* environment variables, CONFIG_DIR/.env and CONFIG_DIR/config.yaml,
    then falls back to field defaults.
- get_settings(cls) builds a settings class once per process.
Design notes:
- Init kwargs come first so tests and embedding code can pin a data directory
    whatever the user's environment holds.
- Missing .env and config.yaml files are ignored.
"""
# endregion
# region Imports
from functools import lru_cache
from typing import Type, TypeVar

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .base import CONFIG_DIR

# endregion
# region FactoryBaseSettings Class
T = TypeVar("T", bound=BaseSettings)

ENV_FILE = CONFIG_DIR / ".env"
YAML_FILE = CONFIG_DIR / "config.yaml"


class FactoryBaseSettings(BaseSettings):
    """
    Priority: Init kwargs > Env Vars > .env > config.yaml > Defaults
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=YAML_FILE),
        )


# endregion
# region get_settings Factory Function


@lru_cache
def get_settings(settings_cls: Type[T]) -> T:
    """Build `settings_cls` once; later calls return the cached instance."""
    return settings_cls()


# endregion
