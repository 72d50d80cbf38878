import typing as _ty

from .parser import parse, split_pairs
from .serializer import serialize, serialize_pairs
from .values import PREFIX, QueryObject, QueryValue


class Query(str):
    """A query string, built from text, a mapping or ``(key, value)`` pairs.

    Mappings and pairs are serialized with the given serialize options.
    """

    PREFIX = PREFIX

    def __new__(
        cls,
        query: (
            str
            | _ty.Sequence[tuple[str, QueryValue]]
            | _ty.Mapping[str, QueryValue]
            | None
        ) = "",
        /,
        **options: _ty.Any,
    ):
        if query is None:
            query = ""
        if isinstance(query, str):
            if options:
                raise TypeError("serialize options only apply to a mapping or pairs")
        elif isinstance(query, _ty.Mapping):
            query = serialize(query, **options)
        else:
            query = serialize_pairs(query, **options)

        return str.__new__(cls, query)

    def decode(query) -> list[tuple[str, str | None]]:
        return split_pairs(str(query))

    def to_dict(query, **options: _ty.Any) -> QueryObject:
        return parse(str(query), **options)

    def with_prefix(query) -> "Query":
        if query.startswith(query.PREFIX):
            return query
        return type(query)(query.PREFIX + query)

    def without_prefix(query) -> "Query":
        return type(query)(query.removeprefix(query.PREFIX))
