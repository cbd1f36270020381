"""Configuration source for simlog.

Two-layer resolution (highest priority wins):
  1. Explicit string — passed to init_registry() or configure()
  2. Environment — the SIMLOG variable

Absence of both means no directives: every component starts at NONE.
"""

import os

ENV_VAR = "SIMLOG"


def get_env_config(environ=None):
    """Return the configuration string from the environment, or ''."""
    env = os.environ if environ is None else environ
    return env.get(ENV_VAR, "")


def resolve_config(explicit=None, environ=None):
    """Resolve the configuration string using two-layer precedence.

    An explicit empty string wins over the environment, which lets a
    caller switch configuration off regardless of SIMLOG.
    """
    if explicit is not None:
        return explicit
    return get_env_config(environ)
