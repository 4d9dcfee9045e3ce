from __future__ import annotations

from typing import TypedDict

from .buffer import DEFAULT_UNIT_WIDTH, IndentedBuffer


class BufferOptions(TypedDict, total=False):
    unit: int | str
    trailing_newline: bool


def mk_buffer(opts: BufferOptions) -> IndentedBuffer:
    return IndentedBuffer(
        opts.get("unit", DEFAULT_UNIT_WIDTH),
        trailing_newline=bool(opts.get("trailing_newline", False)),
    )
