from typing import Sequence

from .document import Document, load, read
from .entity import SchObject, decode_color
from .errors import DecodeError, Diagnostic, FramingError
from .objects import OBJECT_TYPES
from .record import Record, tokenize
from .variant import VariantResult, apply_variant

__all__ = [
    "read",
    "load",
    "Document",
    "Record",
    "SchObject",
    "OBJECT_TYPES",
    "tokenize",
    "decode_color",
    "apply_variant",
    "VariantResult",
    "Diagnostic",
    "DecodeError",
    "FramingError",
]


def main(argv: Sequence[str] | None = None) -> int:
    from ezschdoc.cli import main as cli_main

    return cli_main(argv)
