"""
Prefix printer hooks for time and node decorations.

The simulation core knows the current time and which node is executing;
the logging layer does not. An embedding application fills these two
slots with callables that write their representation to a stream. An
unset slot prints nothing.

Each registry owns a PrefixPrinters instance. The module-level
set/get functions act on the default registry.
"""

from typing import Callable, Optional, TextIO

PrefixPrinter = Callable[[TextIO], None]


class PrefixPrinters:
    """The two decoration slots consulted on every decorated log line.

    Attributes:
        time: Writes the current simulation time, or None
        node: Writes the current node / context id, or None
    """

    def __init__(self, time: Optional[PrefixPrinter] = None,
                 node: Optional[PrefixPrinter] = None):
        self.time = time
        self.node = node

    def print_time(self, file: TextIO) -> bool:
        """Write the time prefix. Returns True if anything was written."""
        if self.time is None:
            return False
        self.time(file)
        return True

    def print_node(self, file: TextIO) -> bool:
        """Write the node prefix. Returns True if anything was written."""
        if self.node is None:
            return False
        self.node(file)
        return True


def _printers() -> PrefixPrinters:
    # Lazy import to avoid circular dependency
    from .registry import get_registry
    return get_registry().printers


def set_time_printer(printer: Optional[PrefixPrinter]) -> None:
    """Install (or clear, with None) the default registry's time printer."""
    _printers().time = printer


def get_time_printer() -> Optional[PrefixPrinter]:
    return _printers().time


def set_node_printer(printer: Optional[PrefixPrinter]) -> None:
    """Install (or clear, with None) the default registry's node printer."""
    _printers().node = printer


def get_node_printer() -> Optional[PrefixPrinter]:
    return _printers().node
