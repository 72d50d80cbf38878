import typing as _ty

from .values import to_string


def _identity(value: str) -> _ty.Any:
    return value


class ParseOptions(_ty.NamedTuple):
    """Options of :func:`urlquery.parse`.

    ``treat_no_value_as_string`` is only consulted when
    ``ignore_no_value`` is off.
    """

    ignore_no_value: bool = True
    treat_no_value_as_string: bool = False
    type_convert: bool = True
    parse: _ty.Callable[[str], _ty.Any] = _identity


class SerializeOptions(_ty.NamedTuple):
    """Options of :func:`urlquery.serialize`."""

    ignore_nullish_value: bool = True
    with_prefix: bool = False
    sorted: bool = True
    stringify: _ty.Callable[[_ty.Any], str] = to_string


_O = _ty.TypeVar("_O", ParseOptions, SerializeOptions)


def apply_defaults(
    options_cls: type[_O],
    options: "_O | _ty.Mapping[str, _ty.Any] | None" = None,
    /,
    **overrides: _ty.Any,
) -> _O:
    """Merge the defaults of ``options_cls``, then ``options``, then
    ``overrides``. Options set to ``None`` keep their default."""
    if options is None:
        values = {}
    elif isinstance(options, options_cls):
        values = options._asdict()
    elif isinstance(options, _ty.Mapping):
        values = dict(options)
    else:
        raise TypeError(
            f"options should be a {options_cls.__name__} or a mapping, "
            f"not {type(options).__name__!r}"
        )
    values.update(overrides)
    for name in values:
        if name not in options_cls._fields:
            raise TypeError(f"unknown {options_cls.__name__} option {name!r}")
    return options_cls(**{k: v for k, v in values.items() if v is not None})
