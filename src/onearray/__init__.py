"""onearray public API."""

from .array import DEFAULT_SEPARATOR, Array, Sequence
from .errors import (
    ArrayError,
    EmptyReduceError,
    InvalidArgumentError,
    InvalidKeyError,
    NotStringConvertibleError,
)
from .values import ABSENT, SequenceLike, SourceKind

try:
    from .interop import from_jax, to_jax
except ModuleNotFoundError as exc:
    if exc.name and exc.name.startswith("jax"):
        _jax_import_error = exc

        def to_jax(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for to_jax(). Install runtime deps first."
            ) from _jax_import_error

        def from_jax(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for from_jax(). Install runtime deps first."
            ) from _jax_import_error

    else:
        raise

__all__ = [
    "ABSENT",
    "Array",
    "Sequence",
    "SequenceLike",
    "SourceKind",
    "DEFAULT_SEPARATOR",
    "to_jax",
    "from_jax",
    "ArrayError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "NotStringConvertibleError",
    "EmptyReduceError",
]
