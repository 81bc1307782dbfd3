"""Password encoder adapters."""

from .encoder import BcryptPasswordEncoder, MockPasswordEncoder

__all__ = [
    "BcryptPasswordEncoder",
    "MockPasswordEncoder",
]
