import logging as _logging
import typing as _ty
import uritools as _uritools

from . import values as _values
from .options import ParseOptions, apply_defaults
from .values import ASSIGNMENT, ENCODING, PREFIX, SEPARATOR

_logger = _logging.getLogger(__name__)


def split_pairs(query_string: str | None) -> list[tuple[str, str | None]]:
    """Decode ``query_string`` once and split it into ``(key, raw)`` pairs.

    One leading ``?`` is dropped after decoding. Empty entries are skipped
    and an entry without ``=`` yields ``None`` as its raw value.
    """
    if not query_string:
        return []
    decoded: str = _uritools.uridecode(query_string, ENCODING, "replace")
    pairs: list[tuple[str, str | None]] = []
    for entry in decoded.removeprefix(PREFIX).split(SEPARATOR):
        if not entry:
            continue
        key, assignment, raw = entry.partition(ASSIGNMENT)
        pairs.append((key, raw if assignment else None))
    return pairs


def _convert(raw: str | None, options: ParseOptions):
    if raw is None:
        return _values.UNDEFINED
    value = options.parse(raw)
    if options.type_convert:
        value = _values.coerce(value)
    return value


def _collect(key: str, values: list, options: ParseOptions) -> list:
    keep_empty = not options.ignore_no_value and options.treat_no_value_as_string
    items = []
    for value in values:
        if _values.is_blank(value):
            if keep_empty:
                items.append("")
            else:
                _logger.debug("Skipped empty value of %r", key)
        elif value is _values.UNDEFINED:
            _logger.debug("Skipped undefined value of %r", key)
        else:
            items.append(value)
    return items


def parse(
    query_string: str | None,
    options: ParseOptions | _ty.Mapping[str, _ty.Any] | None = None,
    /,
    **overrides: _ty.Any,
) -> _values.QueryObject:
    """Parse a query string into a dict.

    >>> parse("?a=1&b=x&b=true&c=")
    {'a': 1, 'b': ['x', True]}

    Keys repeated in the query collect their values into a list, in
    query order. Values are not re-encoded by :func:`serialize`, so text
    holding ``&``, ``=`` or ``%`` does not survive a round trip.

    A key without ``=`` maps to :data:`UNDEFINED` whatever the empty-value
    options say. Empty entries left by stray ``&`` are skipped rather than
    producing an empty key.
    """
    if not query_string:
        return {}
    options = apply_defaults(ParseOptions, options, **overrides)

    grouped: dict[str, list[str | None]] = {}
    for key, raw in split_pairs(query_string):
        grouped.setdefault(key, []).append(raw)

    result: _values.QueryObject = {}
    for key, raws in grouped.items():
        values = [_convert(raw, options) for raw in raws]
        if len(values) > 1:
            result[key] = _collect(key, values, options)
            continue
        value = values[0]
        if _values.is_blank(value):
            if options.ignore_no_value:
                _logger.debug("Dropped %r without value", key)
                continue
            value = "" if options.treat_no_value_as_string else _values.UNDEFINED
        result[key] = value
    return result
