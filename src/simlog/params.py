"""
Parameter joiner for function-trace lines.

Writes streamed values to a file handle with ', ' between them, so a
trace line reads like the call that produced it: ``Foo:Bar(1, 'x', 2.5)``.
"""

from typing import Any, TextIO


class ParameterLogger:
    """Write values to a stream, separating all but the first.

    Usage::

        params = ParameterLogger(sys.stderr)
        params << 1 << 'x' << 2.5       # writes: 1, x, 2.5
    """

    def __init__(self, file: TextIO, separator: str = ', '):
        self.file = file
        self.separator = separator
        self.first = True

    def add(self, value: Any) -> 'ParameterLogger':
        if self.first:
            self.first = False
        else:
            self.file.write(self.separator)
        self.file.write(str(value))
        return self

    __lshift__ = add
