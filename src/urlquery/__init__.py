from .values import (
    UNDEFINED,
    QueryObject,
    QueryScalar,
    QueryValue,
    ValueKind,
    coerce,
    is_nullish,
    kind_of,
    to_number,
    to_string,
)
from .options import ParseOptions, SerializeOptions, apply_defaults
from .parser import parse, split_pairs
from .serializer import serialize, serialize_pairs
from .query import Query
