"""Utilities shared across the DCL fuzzing harnesses"""

import logging

import atheris

from dclconv.dcl import BLOCK_SIZE, TAG_L, TAG_P


def prepare_dclconv_fuzzing() -> None:
    """Used to disable logging of the dclconv module"""
    logging.getLogger("dclconv").setLevel(logging.CRITICAL)


@atheris.instrument_func  # type: ignore[misc]
def make_block(fdp: atheris.FuzzedDataProvider) -> bytes:
    """Build a full-size block with a valid tag from the fuzzer input"""
    tag = TAG_L if fdp.ConsumeBool() else TAG_P
    payload = fdp.ConsumeBytes(fdp.remaining_bytes())
    return (bytes([tag, 0]) + payload).ljust(BLOCK_SIZE, b"\x00")
