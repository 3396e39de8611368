from .options import DEFAULT_LENGTH, PasswordOptions

__all__ = (
    "DEFAULT_LENGTH",
    "PasswordOptions",
)
