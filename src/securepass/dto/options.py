from typing import Any, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..charset import CharClass, build_charset
from ..exc import ConfigurationError
from ..util.model import convert_errors

DEFAULT_LENGTH = 13


class PasswordOptions(BaseModel):
    """
    Fully resolved, immutable options for a single generation or balancing call.

    Defaults are filled in at construction time; nothing downstream deals with
    unset fields. Invalid input raises :class:`ConfigurationError`, whether the
    options are built directly, through :meth:`resolve` or ``model_validate``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    length: int = Field(default=DEFAULT_LENGTH, ge=1)
    include_uppercase: bool = True
    include_numbers: bool = True
    include_special_chars: bool = True
    with_balancing: bool = True
    phrase: Optional[str] = None

    @pydantic.model_validator(mode="wrap")
    @classmethod
    def raise_configuration_error(
        cls,
        data: Any,
        handler: pydantic.ModelWrapValidatorHandler["PasswordOptions"],
    ) -> "PasswordOptions":
        try:
            return handler(data)
        except pydantic.ValidationError as ex:
            raise ConfigurationError(
                "Invalid password options",
                ctx=ConfigurationError.Context(errors=convert_errors(ex)),
            ) from ex

    @classmethod
    def resolve(cls, **fields: Any) -> "PasswordOptions":
        """
        Builds options from keyword arguments, skipping the ones set to ``None`` so
        the defaults apply.

        Raises:
            ConfigurationError: If validation fails.
        """
        return cls(**{k: v for k, v in fields.items() if v is not None})

    @property
    def charset(self) -> str:
        return build_charset(
            include_uppercase=self.include_uppercase,
            include_numbers=self.include_numbers,
            include_special_chars=self.include_special_chars,
        )

    @property
    def required_classes(self) -> tuple[CharClass, ...]:
        """Character classes the options demand, lowercase always first."""
        return tuple(
            cls
            for cls, required in (
                (CharClass.LOWERCASE, True),
                (CharClass.UPPERCASE, self.include_uppercase),
                (CharClass.DIGIT, self.include_numbers),
                (CharClass.SPECIAL, self.include_special_chars),
            )
            if required
        )
