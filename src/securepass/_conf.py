from typing import Annotated

import annotated_types
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .dto import DEFAULT_LENGTH, PasswordOptions
from .generator import MIN_RECOMMENDED_LENGTH


class Settings(BaseSettings):
    """
    Defaults for the command line interface.

    Read from ``SECUREPASS_*`` environment variables and an optional YAML file;
    command line flags override both.
    """

    model_config = SettingsConfigDict(
        env_prefix="SECUREPASS_",
        extra="forbid",
        validate_default=False,
    )

    length: Annotated[int, annotated_types.Ge(1)] = DEFAULT_LENGTH
    include_uppercase: bool = True
    include_numbers: bool = True
    include_special_chars: bool = True
    with_balancing: bool = True
    min_recommended_length: Annotated[int, annotated_types.Ge(1)] = (
        MIN_RECOMMENDED_LENGTH
    )

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings

    def to_options(self, **overrides: object) -> PasswordOptions:
        """
        Resolves the final options, flags set to ``None`` fall back to these
        settings.

        Raises:
            ConfigurationError: If the merged options are invalid.
        """
        return PasswordOptions.resolve(
            **{
                "length": self.length,
                "include_uppercase": self.include_uppercase,
                "include_numbers": self.include_numbers,
                "include_special_chars": self.include_special_chars,
                "with_balancing": self.with_balancing,
                **{k: v for k, v in overrides.items() if v is not None},
            }
        )
