"""
Severity and prefix bit constants.

A level is a 32-bit flag set stored as a plain int. The low bits are
severities, the high nibble holds display prefixes. The two ranges are
disjoint, so they compose with | and test independently with &.

Severity bits, in ascending inclusiveness:

    ERROR  WARN  DEBUG  INFO  FUNCTION  LOGIC
    0x01   0x02  0x04   0x08  0x10      0x20

Each LEVEL_* constant is its own bit OR'd with every lower severity, so
enabling LEVEL_WARN also enables ERROR.
"""

from typing import Dict

NONE = 0x00000000

# Individual severity bits
ERROR = 0x00000001          # Serious error messages only
WARN = 0x00000002           # Warning messages
DEBUG = 0x00000004          # Rare ad-hoc debug messages
INFO = 0x00000008           # Informational messages (e.g., banners)
FUNCTION = 0x00000010       # Function tracing
LOGIC = 0x00000020          # Control flow tracing within functions

# Cumulative levels
LEVEL_ERROR = 0x00000001
LEVEL_WARN = 0x00000003
LEVEL_DEBUG = 0x00000007
LEVEL_INFO = 0x0000000f
LEVEL_FUNCTION = 0x0000001f
LEVEL_LOGIC = 0x0000003f

ALL = 0x0fffffff            # Every severity bit
LEVEL_ALL = ALL

# Prefix bits
PREFIX_FUNC = 0x80000000    # Prefix with component and function name
PREFIX_TIME = 0x40000000    # Prefix with simulation time
PREFIX_NODE = 0x20000000    # Prefix with simulation node / context
PREFIX_LEVEL = 0x10000000   # Prefix with severity label
PREFIX_ALL = 0xf0000000


# Severity bit -> label. Order matters: it is the order labels are
# listed in when a pattern carries more than one bit.
LEVEL_LABELS = {
    ERROR: 'ERROR',
    WARN: 'WARN',
    DEBUG: 'DEBUG',
    INFO: 'INFO',
    FUNCTION: 'FUNCTION',
    LOGIC: 'LOGIC',
}

# Configuration tokens accepted in a level list
LEVEL_TOKENS: Dict[str, int] = {
    'error': ERROR,
    'warn': WARN,
    'debug': DEBUG,
    'info': INFO,
    'function': FUNCTION,
    'func': FUNCTION,
    'logic': LOGIC,
    'all': ALL,
    'level_error': LEVEL_ERROR,
    'level_warn': LEVEL_WARN,
    'level_debug': LEVEL_DEBUG,
    'level_info': LEVEL_INFO,
    'level_function': LEVEL_FUNCTION,
    'level_logic': LEVEL_LOGIC,
    'level_all': LEVEL_ALL,
    'prefix_func': PREFIX_FUNC,
    'prefix_time': PREFIX_TIME,
    'prefix_node': PREFIX_NODE,
    'prefix_level': PREFIX_LEVEL,
    'prefix_all': PREFIX_ALL,
    'prefix': PREFIX_ALL,
}

# Pseudo-token: asks for the component list instead of naming bits
PRINT_LIST_TOKEN = 'print-list'


def is_level_in_set(level: int, level_set: int) -> bool:
    """True if any bit of level is present in level_set."""
    return (level & level_set) != 0


def level_label(level: int) -> str:
    """Return the display label for a severity.

    Single severity bits map straight to their label. Any other pattern
    lists the severity bits it carries, joined with '|', or 'unknown'
    when it carries none.

    Args:
        level: A severity bit or arbitrary bit pattern

    Returns:
        Label such as 'WARN', 'ERROR|WARN' or 'unknown'
    """
    label = LEVEL_LABELS.get(level)
    if label is not None:
        return label
    names = [name for bit, name in LEVEL_LABELS.items() if level & bit]
    if not names:
        return 'unknown'
    return '|'.join(names)
