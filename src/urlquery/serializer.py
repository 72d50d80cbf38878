import logging as _logging
import typing as _ty

from . import values as _values
from .options import SerializeOptions, apply_defaults
from .values import ASSIGNMENT, PREFIX, SEPARATOR

_logger = _logging.getLogger(__name__)

_NULLISH_TEXT = ("", "null", "undefined")

_Options = SerializeOptions | _ty.Mapping[str, _ty.Any] | None


def _stringified(
    items: _ty.Iterable[tuple[_ty.Any, _ty.Any]], options: SerializeOptions
) -> _ty.Iterator[tuple[str, str]]:
    ignore_nullish = options.ignore_nullish_value
    for key, value in items:
        if ignore_nullish and _values.is_nullish(value):
            _logger.debug("Dropped nullish value of %r", key)
            continue
        elements = value if isinstance(value, (list, tuple)) else (value,)
        for element in elements:
            if ignore_nullish and _values.is_nullish(element):
                _logger.debug("Dropped nullish element of %r", key)
                continue
            yield str(key), options.stringify(element)


def _join(
    items: _ty.Iterable[tuple[_ty.Any, _ty.Any]], options: SerializeOptions
) -> str:
    pairs = list(_stringified(items, options))
    if options.ignore_nullish_value:
        # stringify may turn a value into a nullish looking text
        pairs = [(key, text) for key, text in pairs if text not in _NULLISH_TEXT]
    prefix = PREFIX if options.with_prefix else ""
    return prefix + SEPARATOR.join(f"{key}{ASSIGNMENT}{text}" for key, text in pairs)


def serialize(
    query: _ty.Mapping[str, _values.QueryValue] | None,
    options: _Options = None,
    /,
    **overrides: _ty.Any,
) -> str:
    """Serialize a mapping into a query string.

    >>> serialize({"b": [2, 1], "a": "x", "c": None})
    'a=x&b=2&b=1'

    Keys are emitted in sorted order unless ``sorted`` is off; list values
    repeat their key once per element. Values are written as-is, without
    percent-encoding.
    """
    options = apply_defaults(SerializeOptions, options, **overrides)
    if not query:
        return PREFIX if options.with_prefix else ""
    keys = list(query)
    if options.sorted:
        keys.sort(key=str)
    return _join(((key, query[key]) for key in keys), options)


def serialize_pairs(
    pairs: _ty.Iterable[tuple[str, _values.QueryValue]],
    options: _Options = None,
    /,
    **overrides: _ty.Any,
) -> str:
    """Like :func:`serialize` for ``(key, value)`` pairs, which may repeat
    keys. Sorting is stable, so repeated keys keep their relative order."""
    options = apply_defaults(SerializeOptions, options, **overrides)
    pairs = list(pairs)
    if options.sorted:
        pairs.sort(key=lambda pair: str(pair[0]))
    return _join(pairs, options)
