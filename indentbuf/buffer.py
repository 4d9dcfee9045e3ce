"""Indentation-tracking line buffer for simple code generation.

Every appended line gets ``unit * depth`` baked in at append time, so later
depth changes never touch lines already in the buffer. Blocks are opened with
``append_line_then_indent`` and closed with ``append_line_after_outdent``,
which keeps the opening and closing lines at the same depth:

    buf = IndentedBuffer(4)
    buf.append_line_then_indent("fn add_one(x: u64) -> u64 {")
    buf.append_line("x + 1")
    buf.append_line_after_outdent("}")
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType

logger = logging.getLogger(__name__)

DEFAULT_UNIT_WIDTH = 4


def _coerce_unit(unit: int | str) -> str:
    # bool is an int subclass; True would silently mean one space.
    if isinstance(unit, bool) or not isinstance(unit, (int, str)):
        raise TypeError(f"indentation unit must be an int width or a str, got {type(unit).__name__}")
    if isinstance(unit, int):
        if unit < 0:
            raise ValueError(f"indentation width must be non-negative, got {unit}")
        return " " * unit
    return unit


class IndentedBuffer:
    """
    Ordered list of output lines plus the current indentation depth.

    ``unit`` is either a width in spaces or the literal string used per level
    (e.g. ``"\\t"``). Outdenting at depth 0 clamps to 0 rather than raising.
    """

    def __init__(self, unit: int | str = DEFAULT_UNIT_WIDTH, *, trailing_newline: bool = False) -> None:
        self._unit = _coerce_unit(unit)
        self._depth = 0
        self._lines: list[str] = []
        self.trailing_newline = trailing_newline

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"IndentedBuffer(unit={self._unit!r}, depth={self._depth}, lines={len(self._lines)})"

    # -----------------------------
    # Indentation control
    # -----------------------------

    def indent(self) -> None:
        self._depth += 1

    def outdent(self) -> None:
        if self._depth == 0:
            logger.debug("outdent at depth 0 ignored; depth stays 0")
            return
        self._depth -= 1

    # -----------------------------
    # Line emission
    # -----------------------------

    def append_line(self, text: str = "") -> None:
        """Append ``text`` at the current depth. Don't include a newline."""
        self._lines.append(f"{self._unit * self._depth}{text}")

    def append_line_then_indent(self, text: str) -> None:
        """Append a line that opens a block; following lines go one level deeper."""
        self.append_line(text)
        self.indent()

    def append_line_after_outdent(self, text: str) -> None:
        """Append a line that closes a block, at the parent block's depth."""
        self.outdent()
        self.append_line(text)

    def append_lines(self, raw: str) -> None:
        for ln in raw.splitlines():
            self.append_line(ln)

    def block(self, opening: str | None = None, closing: str | None = None) -> "_Block":
        return _Block(self, opening, closing)

    # -----------------------------
    # Rendering
    # -----------------------------

    def render(self) -> str:
        text = "\n".join(self._lines)
        if self.trailing_newline and self._lines:
            text += "\n"
        return text

    __str__ = render

    def write_to(self, path: str | Path, encoding: str = "utf-8") -> int:
        """
        Write the rendered buffer to ``path`` and return the number of
        characters written. OS errors propagate to the caller.
        """
        text = self.render()
        written = Path(path).write_text(text, encoding=encoding)
        logger.debug("Wrote %d lines to %s", len(self._lines), path)
        return written


class _Block:
    def __init__(self, buf: IndentedBuffer, opening: str | None, closing: str | None) -> None:
        self.buf = buf
        self.opening = opening
        self.closing = closing

    def __enter__(self) -> IndentedBuffer:
        if self.opening is None:
            self.buf.indent()
        else:
            self.buf.append_line_then_indent(self.opening)
        return self.buf

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.closing is None:
            self.buf.outdent()
        else:
            self.buf.append_line_after_outdent(self.closing)
