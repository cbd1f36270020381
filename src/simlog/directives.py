"""
Configuration string parsing.

A configuration string is a ':'-separated list of directives, each
naming a component (or '*' for every component) and optionally the
level tokens to enable on it:

    config      := directive (':' directive)*
    directive   := selector ['=' levelList]
    levelList   := levelToken ('|' levelToken)*

    Examples:
        Foo                         # Foo at level_all
        Foo=warn|prefix_time        # WARN bit plus the time prefix
        *=level_debug:Bar=logic     # Every component at level_debug, Bar logic
        print-list                  # List registered components

Tokens contribute their literal bit value via OR. A bare selector means
level_all. The pseudo-token 'print-list' asks for the component list and
contributes no bits.

Parsing never raises for bad input: a directive with an unknown token is
dropped and recorded as an issue, and parsing carries on with the next one.
"""

from dataclasses import dataclass, field
from typing import List

from .errors import ConfigTokenError
from .levels import LEVEL_ALL, LEVEL_TOKENS, NONE, PRINT_LIST_TOKEN

WILDCARD = '*'


@dataclass
class Directive:
    """One selector=levels pair from a configuration string."""
    selector: str
    level: int = LEVEL_ALL
    print_list: bool = False

    def matches(self, name: str) -> bool:
        return self.selector == WILDCARD or self.selector == name


@dataclass
class ConfigIssue:
    """A directive dropped during parsing."""
    directive: str
    token: str
    reason: str = 'unknown level token'

    def __str__(self) -> str:
        return f"{self.reason} '{self.token}' in directive '{self.directive}'"


@dataclass
class ParsedConfig:
    """Result of parsing a whole configuration string."""
    text: str = ''
    directives: List[Directive] = field(default_factory=list)
    issues: List[ConfigIssue] = field(default_factory=list)
    print_list: bool = False

    def level_for(self, name: str) -> int:
        """OR of the levels of every directive matching name."""
        level = NONE
        for d in self.directives:
            if d.matches(name):
                level |= d.level
        return level


def parse_directive(spec: str) -> Directive:
    """Parse a single directive into a Directive.

    Args:
        spec: Directive text like "Foo", "Foo=warn|debug" or "*=level_all"

    Returns:
        Directive with the resolved bit value

    Raises:
        ConfigTokenError: missing selector or unknown level token
    """
    spec = spec.strip()
    selector, sep, level_list = spec.partition('=')
    selector = selector.strip()

    if not sep:
        if selector == PRINT_LIST_TOKEN:
            return Directive(selector=selector, level=NONE, print_list=True)
        if not selector:
            raise ConfigTokenError(spec, selector, 'missing component name')
        return Directive(selector=selector)

    if not selector:
        raise ConfigTokenError(spec, selector, 'missing component name')

    level = NONE
    print_list = False
    for token in level_list.split('|'):
        token = token.strip()
        if token == PRINT_LIST_TOKEN:
            print_list = True
            continue
        bits = LEVEL_TOKENS.get(token)
        if bits is None:
            raise ConfigTokenError(spec, token)
        level |= bits

    return Directive(selector=selector, level=level, print_list=print_list)


def parse_config(text: str) -> ParsedConfig:
    """Parse a full configuration string.

    Empty directives (from '::' or a trailing ':') are skipped.

    Args:
        text: Configuration string, typically the SIMLOG variable

    Returns:
        ParsedConfig with directives, issues and the print-list flag
    """
    result = ParsedConfig(text=text or '')
    for part in result.text.split(':'):
        if not part.strip():
            continue
        try:
            directive = parse_directive(part)
        except ConfigTokenError as e:
            result.issues.append(ConfigIssue(e.directive, e.token, e.reason))
            continue
        if directive.print_list:
            result.print_list = True
        if directive.level != NONE:
            result.directives.append(directive)
    return result


def format_token_list() -> str:
    """Format the list of level tokens for display.

    Returns:
        Formatted string listing every token with its hex bit value.
    """
    lines = ["Level tokens:"]
    max_name = max(len(name) for name in LEVEL_TOKENS)
    for name, bits in LEVEL_TOKENS.items():
        lines.append(f"  {name:<{max_name}}  0x{bits:08x}")
    lines.append(f"  {PRINT_LIST_TOKEN:<{max_name}}  (list registered components)")
    return "\n".join(lines)
