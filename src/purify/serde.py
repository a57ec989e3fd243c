"""JSON serialization support for Option and Result.

Uses a tagged format so values survive a round trip unambiguously.

Format:
    Some(value) -> {"__purify_type__": "Some", "value": <value>}
    NOTHING     -> {"__purify_type__": "Nothing"}
    Ok(value)   -> {"__purify_type__": "Ok", "value": <value>}
    Err(error)  -> {"__purify_type__": "Err", "error": <error>}

IO, Future and Fused hold unevaluated functions and cannot be encoded;
materialize them with .get() and encode the value instead.

Example:
    >>> import json
    >>> from purify import Ok, some
    >>> from purify.serde import ContainerEncoder, container_decoder

    >>> json.dumps(Ok(42), cls=ContainerEncoder)
    '{"__purify_type__": "Ok", "value": 42}'

    >>> json.loads('{"__purify_type__": "Some", "value": 1}', object_hook=container_decoder)
    Some(1)
"""

from __future__ import annotations

import json
from typing import Any

from purify.compose import Fused
from purify.future import Future
from purify.io import IO
from purify.option import NOTHING, Some, _NothingType, from_nullable
from purify.result import Err, Ok

_TYPE_KEY = "__purify_type__"


class ContainerEncoder(json.JSONEncoder):
    """JSON encoder for Option and Result.

    Nested containers are handled recursively.

    Example:
        >>> import json
        >>> from purify import Err
        >>> from purify.serde import ContainerEncoder
        >>> json.dumps(Err("not found"), cls=ContainerEncoder)
        '{"__purify_type__": "Err", "error": "not found"}'
    """

    def default(self, o: Any) -> Any:
        """Encode containers to a JSON-serializable dict.

        Raises:
            TypeError: If o is a deferred container (IO, Future, Fused).
        """
        if isinstance(o, Some):
            return {_TYPE_KEY: "Some", "value": o.get()}

        if isinstance(o, _NothingType):
            return {_TYPE_KEY: "Nothing"}

        if isinstance(o, Ok):
            return {_TYPE_KEY: "Ok", "value": o.get()}

        if isinstance(o, Err):
            return {_TYPE_KEY: "Err", "error": o.error}

        if isinstance(o, (IO, Future, Fused)):
            raise TypeError(
                f"Cannot JSON serialize {type(o).__name__}. "
                "Call .get() first to materialize it, then serialize the value."
            )

        return super().default(o)


def container_decoder(dct: dict[str, Any]) -> Any:
    """JSON object hook that restores Option and Result values.

    Dicts without the type tag, or with an unknown tag, are returned as-is.
    A Some with a null value decodes to NOTHING.
    """
    if _TYPE_KEY not in dct:
        return dct

    type_name = dct[_TYPE_KEY]

    if type_name == "Some":
        return from_nullable(dct.get("value"))

    if type_name == "Nothing":
        return NOTHING

    if type_name == "Ok":
        return Ok(dct["value"])

    if type_name == "Err":
        return Err(dct["error"])

    return dct


class ContainerDecoder(json.JSONDecoder):
    """JSON decoder class equivalent of container_decoder."""

    def __init__(self, **kwargs: Any) -> None:
        kwargs["object_hook"] = container_decoder
        super().__init__(**kwargs)


def dumps(obj: Any, **kwargs: Any) -> str:
    """json.dumps with ContainerEncoder."""
    return json.dumps(obj, cls=ContainerEncoder, **kwargs)


def loads(s: str, **kwargs: Any) -> Any:
    """json.loads with container_decoder."""
    return json.loads(s, object_hook=container_decoder, **kwargs)
