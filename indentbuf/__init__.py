from .buffer import DEFAULT_UNIT_WIDTH, IndentedBuffer
from .types import BufferOptions, mk_buffer

__all__ = [
    # buffer
    "IndentedBuffer", "DEFAULT_UNIT_WIDTH",
    # configuration
    "BufferOptions", "mk_buffer",
]
