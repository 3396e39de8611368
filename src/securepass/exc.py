from dataclasses import dataclass
from typing import Any, TypedDict

from typing_extensions import override

__all__ = (
    "ApplicationError",
    "ConfigurationError",
    "InvalidInputError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None = None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class ConfigurationError(ApplicationError):
    """
    Raised when password options cannot be turned into a usable configuration,
    e.g. a non-positive length or an empty character universe.
    """

    class Context(TypedDict):
        """
        Attributes:
            errors: Validation errors as produced by
                :func:`securepass.util.model.convert_errors`.
        """

        errors: list[Any]

    @override
    def format_message(self) -> str:
        if not self.ctx:
            return self.message
        return "%s\n\n%s" % (self.message, self.ctx["errors"])


@dataclass(slots=True)
class InvalidInputError(ApplicationError):
    """
    Raised when an operation receives input it cannot work with: an empty phrase,
    an empty password, or balancing constraints that cannot be met without
    changing the password length.
    """
