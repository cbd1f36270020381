"""
simlog — per-component logging for simulations.

Each module registers a named LogComponent; operators enable severities
and display prefixes per component through the SIMLOG environment
variable or direct calls.

Public API:
    LogComponent         — named component with enabled levels and block mask
    ComponentRegistry    — name -> component mapping plus configuration
    init_registry        — replace the default registry
    get_registry         — access the default registry
    log_component_*      — enable/disable/list on the default registry
    log_startup_complete — end of startup; flushes a pending print-list
    parse_config         — parse a SIMLOG-style string
    PrefixPrinters       — time / node decoration slots
    ParameterLogger      — ', '-joining stream adapter
    trace                — function tracing decorator
"""

from simlog._version import __version__, __app_name__
from simlog.levels import (
    NONE, ERROR, WARN, DEBUG, INFO, FUNCTION, LOGIC, ALL,
    LEVEL_ERROR, LEVEL_WARN, LEVEL_DEBUG, LEVEL_INFO,
    LEVEL_FUNCTION, LEVEL_LOGIC, LEVEL_ALL,
    PREFIX_FUNC, PREFIX_TIME, PREFIX_NODE, PREFIX_LEVEL, PREFIX_ALL,
    is_level_in_set, level_label,
)
from simlog.errors import SimlogError, DuplicateComponentError, ConfigTokenError
from simlog.component import LogComponent
from simlog.registry import (
    ComponentRegistry, init_registry, get_registry,
    log_component_enable, log_component_disable,
    log_component_enable_all, log_component_disable_all,
    log_component_print_list, log_startup_complete,
)
from simlog.directives import Directive, ConfigIssue, ParsedConfig, parse_config
from simlog.printers import (
    PrefixPrinters, set_time_printer, get_time_printer,
    set_node_printer, get_node_printer,
)
from simlog.params import ParameterLogger
from simlog.trace import trace

__all__ = [
    '__version__', '__app_name__',
    'NONE', 'ERROR', 'WARN', 'DEBUG', 'INFO', 'FUNCTION', 'LOGIC', 'ALL',
    'LEVEL_ERROR', 'LEVEL_WARN', 'LEVEL_DEBUG', 'LEVEL_INFO',
    'LEVEL_FUNCTION', 'LEVEL_LOGIC', 'LEVEL_ALL',
    'PREFIX_FUNC', 'PREFIX_TIME', 'PREFIX_NODE', 'PREFIX_LEVEL', 'PREFIX_ALL',
    'is_level_in_set', 'level_label',
    'SimlogError', 'DuplicateComponentError', 'ConfigTokenError',
    'LogComponent',
    'ComponentRegistry', 'init_registry', 'get_registry',
    'log_component_enable', 'log_component_disable',
    'log_component_enable_all', 'log_component_disable_all',
    'log_component_print_list', 'log_startup_complete',
    'Directive', 'ConfigIssue', 'ParsedConfig', 'parse_config',
    'PrefixPrinters', 'set_time_printer', 'get_time_printer',
    'set_node_printer', 'get_node_printer',
    'ParameterLogger',
    'trace',
]
