"""Per-line field coloring."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, TextIO

from hl_cli.core.color import DEFAULT, AnsiCode, SizeConditional, render
from hl_cli.core.fields import iter_fields
from hl_cli.core.size import classify
from hl_cli.errors import SkipPatternNotFound

if TYPE_CHECKING:
    from hl_cli.config.schema import Config
    from hl_cli.core.binding import FieldColorBinding

log = logging.getLogger(__name__)


class LineProcessor:
    """Colors the configured fields of each line."""

    def __init__(self, config: Config) -> None:
        """Initialize the processor.

        Args:
            config: The configuration object
        """
        self.config = config
        self.reset = render(DEFAULT)

        # First binding per field position wins
        self._bindings: dict[int, FieldColorBinding] = {}
        for binding in config.bindings:
            if binding.field < 0:
                log.debug("Field %d is negative and will never be colored", binding.field)
            elif binding.field in self._bindings:
                log.warning(
                    "Field %d is bound more than once; only the first binding applies",
                    binding.field,
                )
            else:
                self._bindings[binding.field] = binding

    def binding_for(self, index: int) -> FieldColorBinding | None:
        """Get the binding that applies to the field at ``index``."""
        return self._bindings.get(index)

    def iter_line(self, line: str) -> Iterator[str]:
        """Yield the output for a line in the order it should be written.

        The text up to and including the skip pattern is yielded first,
        before any field of the remainder is looked at.

        Raises:
            SkipPatternNotFound: If a skip pattern is set and not in the line
            IntParseError: If a field bound to the size color is not a size
        """
        skip = self.config.skip
        if skip is not None:
            pos = line.find(skip)
            if pos == -1:
                raise SkipPatternNotFound(skip)
            pos += len(skip)
            yield line[:pos]
            line = line[pos:]

        for i, field in enumerate(iter_fields(line, self.config.delimiter)):
            binding = self.binding_for(i)
            if binding is None:
                yield field
                continue

            match binding.color:
                case AnsiCode(code=code):
                    color = code
                case SizeConditional():
                    color = render(
                        classify(field, self.config.red_size, self.config.yellow_size)
                    )
            yield f"{color}{field}{self.reset}"

    def process_line(self, line: str, out: TextIO) -> None:
        """Write the colored line to ``out``."""
        for chunk in self.iter_line(line):
            out.write(chunk)

    def render_line(self, line: str) -> str:
        """Return the colored line as a string."""
        buf = io.StringIO()
        self.process_line(line, buf)
        return buf.getvalue()

    def run(self, lines: Iterable[str], out: TextIO) -> None:
        """Color every line of ``lines`` until the input is exhausted."""
        count = 0
        for line in lines:
            self.process_line(line, out)
            count += 1
        log.debug("Processed %d lines", count)
