"""
LogComponent — one named unit of per-module logging state.

Each module defines its component once, at import time::

    from simlog import LogComponent

    _log = LogComponent("Radio")

    def transmit(packet):
        _log.function(packet)
        _log.debug("queued {size} bytes", size=len(packet))

A component holds two bit sets: the levels currently enabled and a
block mask of levels that can never be enabled. Blocked bits are
dropped silently by enable(), which is how the logging helpers keep
themselves from recursing into their own output.
"""

import inspect
import io
from typing import Any, Optional

from . import levels as _lv
from .params import ParameterLogger


class LogComponent:
    """Named log component with enabled levels and a block mask.

    Attributes:
        levels: Currently enabled severity and prefix bits
        mask: Bits that may never be enabled
        registry: Registry this component belongs to
    """

    def __init__(self, name: str, mask: int = _lv.NONE, registry=None):
        if registry is None:
            # Lazy import to avoid circular dependency
            from .registry import get_registry
            registry = get_registry()
        self._name = name
        self.mask = mask
        self.levels = _lv.NONE
        self.registry = registry
        registry.register(self)

    def __repr__(self) -> str:
        return (f"LogComponent({self._name!r}, levels=0x{self.levels:08x}, "
                f"mask=0x{self.mask:08x})")

    @property
    def name(self) -> str:
        return self._name

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def is_enabled(self, level: int) -> bool:
        """True if any bit of level is enabled."""
        return _lv.is_level_in_set(level, self.levels)

    def is_none_enabled(self) -> bool:
        return self.levels == _lv.NONE

    def enable(self, level: int) -> None:
        """Enable level, minus any bits covered by the block mask."""
        self.levels |= level & ~self.mask

    def disable(self, level: int) -> None:
        self.levels &= ~level

    def set_mask(self, level: int) -> None:
        """Block level permanently and clear it if currently enabled."""
        self.mask |= level
        self.levels &= ~level

    @staticmethod
    def get_level_label(level: int) -> str:
        return _lv.level_label(level)

    # -------------------------------------------------------------------------
    # Emit
    # -------------------------------------------------------------------------

    def log(self, level: int, message: str, **kwargs: Any) -> None:
        """Write a decorated message if level is enabled.

        Args:
            level: Severity bit the message is logged at
            message: Format string (uses str.format with kwargs)
            **kwargs: Values for template placeholders
        """
        if self.is_enabled(level):
            self._write(level, message, kwargs, _caller_name())

    def error(self, message: str, **kwargs: Any) -> None:
        if self.is_enabled(_lv.ERROR):
            self._write(_lv.ERROR, message, kwargs, _caller_name())

    def warn(self, message: str, **kwargs: Any) -> None:
        if self.is_enabled(_lv.WARN):
            self._write(_lv.WARN, message, kwargs, _caller_name())

    def debug(self, message: str, **kwargs: Any) -> None:
        if self.is_enabled(_lv.DEBUG):
            self._write(_lv.DEBUG, message, kwargs, _caller_name())

    def info(self, message: str, **kwargs: Any) -> None:
        if self.is_enabled(_lv.INFO):
            self._write(_lv.INFO, message, kwargs, _caller_name())

    def logic(self, message: str, **kwargs: Any) -> None:
        if self.is_enabled(_lv.LOGIC):
            self._write(_lv.LOGIC, message, kwargs, _caller_name())

    def function(self, *params: Any, func_name: Optional[str] = None) -> None:
        """Write a function-trace line: ``Name:func(p1, p2)``.

        Only the time and node prefixes apply; the line already names
        the component and function.
        """
        if not self.is_enabled(_lv.FUNCTION):
            return
        if func_name is None:
            func_name = _caller_name()
        buf = io.StringIO()
        self._write_context(buf)
        buf.write(f"{self._name}:{func_name}(")
        joiner = ParameterLogger(buf)
        for p in params:
            joiner.add(p)
        buf.write(")")
        print(buf.getvalue(), file=self.registry.file)

    def uncond(self, message: str, **kwargs: Any) -> None:
        """Write a message regardless of enabled levels, undecorated."""
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.registry.file)

    def _write_context(self, buf: io.StringIO) -> None:
        printers = self.registry.printers
        if self.is_enabled(_lv.PREFIX_TIME) and printers.print_time(buf):
            buf.write(" ")
        if self.is_enabled(_lv.PREFIX_NODE) and printers.print_node(buf):
            buf.write(" ")

    def _write(self, level: int, message: str, kwargs: dict,
               func_name: str) -> None:
        buf = io.StringIO()
        self._write_context(buf)
        if self.is_enabled(_lv.PREFIX_FUNC):
            buf.write(f"{self._name}:{func_name}(): ")
        if self.is_enabled(_lv.PREFIX_LEVEL):
            buf.write(f"[{_lv.level_label(level)}] ")
        buf.write(message.format(**kwargs) if kwargs else message)
        print(buf.getvalue(), file=self.registry.file)


def _caller_name() -> str:
    """Name of the function that called the LogComponent method."""
    frame = inspect.currentframe()
    try:
        # _caller_name <- LogComponent method <- caller
        caller = frame.f_back.f_back if frame is not None else None
        return caller.f_code.co_name if caller is not None else "unknown"
    finally:
        del frame
