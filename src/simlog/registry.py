"""
ComponentRegistry — name to LogComponent mapping and configuration.

The registry owns everything process-wide about logging: the components
(in registration order), the parsed configuration string, the prefix
printers, and the stream log lines and diagnostics go to.

Components register themselves when constructed. Registration applies
every directive whose selector is the component's name or '*', so the
order of directives relative to component construction does not matter:

    registry = ComponentRegistry(config="*=level_warn:Radio=level_all")
    radio = LogComponent("Radio", registry=registry)   # level_all | level_warn
    mac = LogComponent("Mac", registry=registry)       # level_warn

A default registry is created lazily on first use, configured from the
SIMLOG environment variable. Applications call init_registry() during
startup to replace it, or configure() to re-apply a new string to the
components already registered.

A print-list request in the configuration is held until startup is over:
log_startup_complete() (or registry.startup_complete()) prints it once,
configure() prints it right away, and a request still pending when the
interpreter exits is printed then.

No locking: configure once at startup before spawning threads.
"""

import atexit
import sys
from typing import TYPE_CHECKING, Dict, List, Optional, TextIO

from .config import resolve_config
from .directives import ParsedConfig, parse_config
from .errors import DuplicateComponentError
from .printers import PrefixPrinters

if TYPE_CHECKING:
    from .component import LogComponent


class ComponentRegistry:
    """Central coordinator for log components.

    Usage::

        registry = ComponentRegistry(config="Radio=warn|prefix_time")
        radio = LogComponent("Radio", registry=registry)
        registry.enable_all(LEVEL_INFO)
        registry.print_list()
    """

    def __init__(
        self,
        config: str = None,
        file: TextIO = None,
        printers: PrefixPrinters = None,
    ):
        self._components: Dict[str, 'LogComponent'] = {}
        self.file = file if file is not None else sys.stderr
        self.printers = printers if printers is not None else PrefixPrinters()
        self._config = ParsedConfig()
        self._set_config(config or '')

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def config(self) -> ParsedConfig:
        """The parsed configuration currently in force."""
        return self._config

    def _set_config(self, text: str) -> None:
        self._config = parse_config(text)
        self._print_list_pending = self._config.print_list
        for issue in self._config.issues:
            print(f"simlog: {issue}", file=self.file)

    def configure(self, config: str = None, environ=None) -> ParsedConfig:
        """Replace the configuration string and apply it to every component.

        Directives only ever enable bits; anything already enabled stays.
        If the string contains 'print-list', the component list is printed
        once after the directives are applied.

        Args:
            config: Configuration string. None reads SIMLOG.
            environ: Environment mapping (default os.environ)

        Returns:
            The parsed configuration
        """
        self._set_config(resolve_config(config, environ))
        for component in self._components.values():
            self.apply_config(component)
        self.startup_complete()
        return self._config

    def startup_complete(self) -> bool:
        """Mark the end of component construction.

        If the configuration asked for 'print-list' and the list has not
        been printed for it yet, print it now. Later calls do nothing until
        a new configuration string asks again.

        Returns:
            True if the list was printed
        """
        if not self._print_list_pending:
            return False
        self._print_list_pending = False
        self.print_list()
        return True

    def apply_config(self, component: 'LogComponent') -> None:
        """Enable the levels every matching directive asks for."""
        level = self._config.level_for(component.name)
        if level:
            component.enable(level)

    # -------------------------------------------------------------------------
    # Registration and lookup
    # -------------------------------------------------------------------------

    def register(self, component: 'LogComponent') -> None:
        """Add a component and apply the configuration to it.

        Raises:
            DuplicateComponentError: name already registered. The existing
                component is left untouched.
        """
        if component.name in self._components:
            raise DuplicateComponentError(component.name)
        self._components[component.name] = component
        self.apply_config(component)

    def find(self, name: str) -> Optional['LogComponent']:
        """Look up a component by exact name. Returns None if not found."""
        return self._components.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)

    def list_all(self) -> List[str]:
        """Registered component names in registration order."""
        return list(self._components)

    def print_list(self, file: TextIO = None) -> None:
        """Write the registered names, one per line (default: stdout)."""
        out = file if file is not None else sys.stdout
        print("Registered log components:", file=out)
        for name in self._components:
            print(f"  {name}", file=out)

    # -------------------------------------------------------------------------
    # Enable / disable
    # -------------------------------------------------------------------------

    def enable(self, name: str, level: int) -> bool:
        """Enable level on a named component.

        A name that matches nothing is not an error.

        Returns:
            True if the component exists
        """
        component = self._components.get(name)
        if component is None:
            return False
        component.enable(level)
        return True

    def disable(self, name: str, level: int) -> bool:
        """Disable level on a named component. Returns True if it exists."""
        component = self._components.get(name)
        if component is None:
            return False
        component.disable(level)
        return True

    def enable_all(self, level: int) -> None:
        """Enable level on every registered component."""
        for component in self._components.values():
            component.enable(level)

    def disable_all(self, level: int) -> None:
        """Disable level on every registered component."""
        for component in self._components.values():
            component.disable(level)

    def disable_all_completely(self, level: int) -> None:
        """Same as disable_all(); kept for callers that bypass the per-name API."""
        self.disable_all(level)


# =============================================================================
# Module-level default registry
# =============================================================================

_registry: Optional[ComponentRegistry] = None
_exit_hook_installed = False


def _flush_print_list() -> None:
    """Print a print-list request nobody flushed with log_startup_complete()."""
    if _registry is not None:
        _registry.startup_complete()


def _install_exit_hook() -> None:
    global _exit_hook_installed
    if not _exit_hook_installed:
        atexit.register(_flush_print_list)
        _exit_hook_installed = True


def init_registry(config: str = None, file: TextIO = None,
                  environ=None) -> ComponentRegistry:
    """Replace the default registry with a fresh one.

    Call once at program startup, before modules construct their
    components. Components already attached to the old registry are
    not carried over.

    Args:
        config: Configuration string. None reads SIMLOG.
        file: Stream for log lines and diagnostics (default: stderr)
        environ: Environment mapping (default os.environ)

    Returns:
        The initialized ComponentRegistry
    """
    global _registry
    _registry = ComponentRegistry(config=resolve_config(config, environ), file=file)
    _install_exit_hook()
    return _registry


def get_registry() -> ComponentRegistry:
    """Get the default registry, creating one from SIMLOG if needed."""
    global _registry
    if _registry is None:
        _registry = ComponentRegistry(config=resolve_config())
        _install_exit_hook()
    return _registry


def log_startup_complete() -> bool:
    """End of startup for the default registry: flush a pending print-list.

    Call once after every module has constructed its components. If it is
    never called, a pending print-list is printed at interpreter exit.
    """
    return get_registry().startup_complete()


def log_component_enable(name: str, level: int) -> bool:
    """Enable level on the named component of the default registry."""
    return get_registry().enable(name, level)


def log_component_disable(name: str, level: int) -> bool:
    """Disable level on the named component of the default registry."""
    return get_registry().disable(name, level)


def log_component_enable_all(level: int) -> None:
    get_registry().enable_all(level)


def log_component_disable_all(level: int) -> None:
    get_registry().disable_all(level)


def log_component_print_list(file: TextIO = None) -> None:
    get_registry().print_list(file)
