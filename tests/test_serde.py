"""Tests for JSON serialization of Option and Result."""

from __future__ import annotations

import json

import pytest

from purify import IO, NOTHING, Err, Future, Ok, Some, io_some
from purify.serde import (
    ContainerDecoder,
    ContainerEncoder,
    container_decoder,
    dumps,
    loads,
)


class TestContainerEncoder:
    def test_encode_ok(self) -> None:
        data = json.loads(json.dumps(Ok(42), cls=ContainerEncoder))
        assert data == {"__purify_type__": "Ok", "value": 42}

    def test_encode_err(self) -> None:
        data = json.loads(json.dumps(Err({"code": 404}), cls=ContainerEncoder))
        assert data == {"__purify_type__": "Err", "error": {"code": 404}}

    def test_encode_some(self) -> None:
        data = json.loads(json.dumps(Some([1, 2]), cls=ContainerEncoder))
        assert data == {"__purify_type__": "Some", "value": [1, 2]}

    def test_encode_nothing(self) -> None:
        data = json.loads(json.dumps(NOTHING, cls=ContainerEncoder))
        assert data == {"__purify_type__": "Nothing"}

    def test_encode_nested(self) -> None:
        data = json.loads(dumps({"user": Ok(Some("ada"))}))
        assert data["user"]["value"] == {"__purify_type__": "Some", "value": "ada"}

    @pytest.mark.parametrize(
        "deferred",
        [IO.of(lambda: 1), Future.of(1), io_some(1)],
        ids=["io", "future", "fused"],
    )
    def test_deferred_containers_refuse(self, deferred: object) -> None:
        with pytest.raises(TypeError, match=r"Call \.get\(\) first"):
            dumps(deferred)

    def test_unknown_type_still_fails(self) -> None:
        with pytest.raises(TypeError):
            dumps(object())


class TestContainerDecoder:
    def test_decode_ok(self) -> None:
        assert loads('{"__purify_type__": "Ok", "value": 1}') == Ok(1)

    def test_decode_err(self) -> None:
        assert loads('{"__purify_type__": "Err", "error": "x"}') == Err("x")

    def test_decode_some(self) -> None:
        assert json.loads('{"__purify_type__": "Some", "value": 1}', object_hook=container_decoder) == Some(1)

    def test_decode_some_null_collapses(self) -> None:
        assert loads('{"__purify_type__": "Some", "value": null}') is NOTHING

    def test_decode_nothing(self) -> None:
        assert loads('{"__purify_type__": "Nothing"}') is NOTHING

    def test_plain_dict_untouched(self) -> None:
        assert loads('{"a": 1}') == {"a": 1}

    def test_unknown_tag_untouched(self) -> None:
        raw = {"__purify_type__": "Either", "value": 1}
        assert loads(json.dumps(raw)) == raw

    def test_decoder_class(self) -> None:
        decoded = json.loads('[{"__purify_type__": "Ok", "value": 1}]', cls=ContainerDecoder)
        assert decoded == [Ok(1)]

    def test_nested_round_trip(self) -> None:
        original = {"results": [Ok(Some(1)), Err("bad"), Ok(NOTHING)]}
        assert loads(dumps(original)) == original
