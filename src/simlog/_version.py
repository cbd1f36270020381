"""
Version information for simlog.

MAJOR.MINOR.PATCH plus an optional pre-release phase. BASE_VERSION is the
human-facing string (0.1.0-alpha); PIP_VERSION is the PEP 440 form setup.py
installs under (0.1.0a0).
"""

MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta", "rc1", ...

__app_name__ = "simlog"

_PEP440_PHASES = {"alpha": "a0", "beta": "b0"}


def get_base_version():
    """Return MAJOR.MINOR.PATCH[-PHASE]."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """Return the PEP 440 version: 0.1.0-alpha -> 0.1.0a0, 0.1.0-rc1 -> 0.1.0rc1."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base += _PEP440_PHASES.get(PHASE, PHASE)
    return base


BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
__version__ = BASE_VERSION
