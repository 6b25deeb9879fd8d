"""
Single-line text persistence for numkit values.

Each value is stored as one line of text: the ``to_string()`` form for
Rational, UnsignedInt and BigUnsignedInt, and the coefficient line for
Polynomial. Reading a file whose first line is missing or blank yields the
type's zero value.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, NamedTuple, TypeVar

from .core.config import settings
from .core.logging import get_context_logger
from .math import BigUnsignedInt, Polynomial, Rational, UnsignedInt

logger = get_context_logger(__name__, component="storage")

V = TypeVar("V", Rational, UnsignedInt, BigUnsignedInt, Polynomial)


class _Codec(NamedTuple):
    dump: Callable[[object], str]
    load: Callable[[str], object]
    zero: Callable[[], object]


_CODECS: dict[type, _Codec] = {
    Rational: _Codec(Rational.to_string, Rational.parse, lambda: Rational(0, 1)),
    UnsignedInt: _Codec(UnsignedInt.to_string, UnsignedInt.parse, lambda: UnsignedInt(0)),
    BigUnsignedInt: _Codec(BigUnsignedInt.to_string, BigUnsignedInt.parse, lambda: BigUnsignedInt(0)),
    Polynomial: _Codec(Polynomial.to_line, Polynomial.parse, Polynomial.zero),
}

# Names accepted on the command line.
VALUE_TYPES: dict[str, type] = {
    "rational": Rational,
    "unsigned": UnsignedInt,
    "bigunsigned": BigUnsignedInt,
    "poly": Polynomial,
}


def _codec_for(cls: type) -> _Codec:
    try:
        return _CODECS[cls]
    except KeyError:
        raise TypeError(f"Cannot persist values of type {cls.__name__}") from None


def save_to_file(value: V, path: str | Path, encoding: str | None = None) -> Path:
    """
    Write ``value`` as a single line.

    Args:
        value: Value to persist
        path: Destination file (its directory must exist)
        encoding: Text encoding (default: settings.FILE_ENCODING)

    Returns:
        The path written
    """
    codec = _codec_for(type(value))
    path = Path(path)
    line = codec.dump(value)
    path.write_text(line + "\n", encoding=encoding or settings.FILE_ENCODING)
    logger.debug(
        "Saved %s to %s: %s", type(value).__name__, path, line,
        extra_data={"path": str(path), "value_type": type(value).__name__},
    )
    return path


def read_from_file(cls: type[V], path: str | Path, encoding: str | None = None) -> V:
    """
    Read a value of type ``cls`` from the first line of ``path``.

    Raises:
        FileNotFoundError: If path does not exist
        InvalidFormatError: If the line does not match the type's grammar
    """
    codec = _codec_for(cls)
    path = Path(path)
    with path.open("r", encoding=encoding or settings.FILE_ENCODING) as fh:
        line = fh.readline()

    if not line.strip():
        logger.debug(
            "Empty value file %s, using zero %s", path, cls.__name__,
            extra_data={"path": str(path), "value_type": cls.__name__},
        )
        return codec.zero()

    value = codec.load(line.strip())
    logger.debug(
        "Loaded %s from %s: %s", cls.__name__, path, line.strip(),
        extra_data={"path": str(path), "value_type": cls.__name__},
    )
    return value
