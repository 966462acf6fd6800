import re
from dataclasses import dataclass
from cb.common.logger import log
from cb.core.attributes import SCHEMA, Breakpoint, Kind, Responsive

# Leading numeric prefix, same idea as a browser's parseFloat: "12px" -> 12, "  -3.5e2x" -> -350, "px12" -> rejected.
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


# Typed reference to one breakpoint variant of a responsive family.
@dataclass(frozen=True)
class ResponsiveRef:
    name: str
    breakpoint: Breakpoint
    family: Responsive

    # The concrete flat key, e.g. boxBorderTRadiusTablet
    @property
    def key(self):
        return f"{self.name}{self.breakpoint.suffix}"

    def get(self):
        return self.family.get(self.breakpoint)

    def set(self, value):
        self.family.set(self.breakpoint, value)


# The breakpoint currently being edited. This is a single per-instance toggle shared by every family.
def active_breakpoint(config) -> Breakpoint:
    return Breakpoint.parse(config.get("counterNumberResponsive"))


# Maps a logical family name to its concrete variant for the given breakpoint (or the active one when omitted).
def resolve(config, name, breakpoint=None) -> ResponsiveRef:
    bp = active_breakpoint(config) if breakpoint is None else Breakpoint.parse(breakpoint)
    return ResponsiveRef(name, bp, config.family(name))


# Parses user input into a float, returning None when there is no leading number or it's out of bounds.
def parse_number(value, minimum=None, maximum=None):
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        match = _NUMERIC_PREFIX.match(str(value))
        if match is None:
            return None
        parsed = float(match.group(1))
    if parsed != parsed:
        return None
    if minimum is not None and parsed < minimum:
        return None
    if maximum is not None and parsed > maximum:
        return None
    return parsed


# Applies one user edit. Responsive families are written only at the active breakpoint, numeric attributes are
# parsed first and rejected edits leave the configuration untouched. Returns whether the value was stored.
def edit_attribute(config, name, value, minimum=None, maximum=None) -> bool:
    spec = SCHEMA.get(name)
    if spec is not None and spec.kind == Kind.NUMBER:
        parsed = parse_number(value, minimum, maximum)
        if parsed is None:
            log.debug(f"Rejected non-numeric or out of range edit for '{name}': {value!r}")
            return False
        value = parsed

    if config.is_family(name):
        ref = resolve(config, name)
        ref.set(value)
        log.debug(f"Set '{ref.key}' to {value!r}")
    else:
        config[name] = value
        log.debug(f"Set '{name}' to {value!r}")
    return True
