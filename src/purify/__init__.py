from __future__ import annotations

import logging

from purify.compose import Fused, compose_m, io_nothing, io_option, io_some
from purify.future import Future
from purify.io import DO_NOTHING, IO
from purify.lifting import lift, lift_function, lifted
from purify.monad import Lifter, Monad, Reinject, identity, materialize
from purify.option import (
    NOTHING,
    Nothing,
    Option,
    Some,
    from_nullable,
    is_nothing,
    is_some,
    nothing,
    sequence_options,
    some,
    traverse_options,
)
from purify.result import Err, Ok, Result, err, is_err, is_ok, ok, oops, result_of, sequence_results, traverse_results
from purify.serde import ContainerDecoder, ContainerEncoder, container_decoder, dumps, loads

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Container contract
    "Monad",
    "Reinject",
    "Lifter",
    "identity",
    "materialize",
    # Option
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "from_nullable",
    "some",
    "nothing",
    "is_some",
    "is_nothing",
    "sequence_options",
    "traverse_options",
    # Result
    "Result",
    "Ok",
    "Err",
    "ok",
    "err",
    "oops",
    "result_of",
    "is_ok",
    "is_err",
    "sequence_results",
    "traverse_results",
    # Deferred computations
    "IO",
    "DO_NOTHING",
    "Future",
    # Combinators
    "Fused",
    "compose_m",
    "io_option",
    "io_some",
    "io_nothing",
    "lift",
    "lift_function",
    "lifted",
    # Serialization
    "ContainerEncoder",
    "ContainerDecoder",
    "container_decoder",
    "dumps",
    "loads",
]
