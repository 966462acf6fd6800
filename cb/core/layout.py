from enum import Enum
from cb.common.logger import log
from cb.core.attributes import Breakpoint


class LayoutKind(str, Enum):
    LAYOUT1 = "layout1"
    LAYOUT2 = "layout2"
    LAYOUT3 = "layout3"
    LAYOUT4 = "layout4"

    # Returns None for anything that isn't a known layout
    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


# Layouts with no radius or shadow of their own, and layouts that start out without a border.
RESET_LAYOUTS = (LayoutKind.LAYOUT2, LayoutKind.LAYOUT3, LayoutKind.LAYOUT4)
BORDERED_LAYOUTS = (LayoutKind.LAYOUT1, LayoutKind.LAYOUT2)
BORDERLESS_LAYOUTS = (LayoutKind.LAYOUT3, LayoutKind.LAYOUT4)

RADIUS_FAMILIES = ("boxBorderTRadius", "boxBorderRRadius", "boxBorderBRadius", "boxBorderLRadius")
SHADOW_FAMILIES = ("boxBoxshadowHoffset", "boxBoxshadowVoffset", "boxBoxshadowBlur", "boxBoxshadowSpread")
BORDER_FAMILIES = ("boxBorderT", "boxBorderR", "boxBorderB", "boxBorderL")

# Desktop defaults seeded when arriving at layout1
LAYOUT1_DEFAULTS = {
    "boxBorderTRadiusDesktop": 45,
    "boxBorderRRadiusDesktop": 0,
    "boxBorderBRadiusDesktop": 45,
    "boxBorderLRadiusDesktop": 0,
    "boxBorderRadiusUnitDesktop": "%",
    "boxBoxshadowHoffsetDesktop": 15,
    "boxBoxshadowVoffsetDesktop": 0,
    "boxBoxshadowBlurDesktop": 50,
    "boxBoxshadowSpreadDesktop": -25,
    "boxBoxshadowColor": "#DF00FF",
}
# Desktop border defaults seeded when arriving at layout1 or layout2
BORDERED_DEFAULTS = {
    "boxBorderTDesktop": 5,
    "boxBorderRDesktop": 0,
    "boxBorderBDesktop": 5,
    "boxBorderLDesktop": 0,
    "boxBorderUnitDesktop": "px",
}


# Remembers, per block instance, the last layout styles were generated for, and whether the one-time "no border"
# reset for layout3/layout4 has already been applied. Owned by the caller; call evict() when a block instance is
# removed. Not safe to share across threads.
class LayoutMemory:

    def __init__(self, layouts=None, border_style_applied=None):
        self._layouts = dict(layouts or {})
        self._border_style_applied = dict(border_style_applied or {})

    def last_layout(self, instance_id):
        return self._layouts.get(instance_id)

    def record(self, instance_id, layout):
        self._layouts[instance_id] = layout

    def border_style_applied(self, instance_id):
        return self._border_style_applied.get(instance_id, False)

    def set_border_style_applied(self, instance_id, applied):
        self._border_style_applied[instance_id] = bool(applied)

    # Drops everything known about an instance. Returns whether anything was there.
    def evict(self, instance_id):
        found = instance_id in self._layouts or instance_id in self._border_style_applied
        self._layouts.pop(instance_id, None)
        self._border_style_applied.pop(instance_id, None)
        if found:
            log.debug(f"Evicted layout memory for '{instance_id}'")
        return found

    def __contains__(self, instance_id):
        return instance_id in self._layouts

    def __len__(self):
        return len(self._layouts)

    def to_dict(self):
        return {
            "layouts": dict(self._layouts),
            "border_style_applied": dict(self._border_style_applied),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(data.get("layouts"), data.get("border_style_applied"))


#region === Helpers ===

def _null_families(config, families):
    for name in families:
        fam = config.family(name)
        for bp in Breakpoint:
            fam.set(bp, None)

# Sets each key to its default only if it's currently None. Returns the list of keys that actually changed.
def _seed(config, defaults):
    seeded = []
    for key, value in defaults.items():
        if config.get(key) is None:
            config[key] = value
            seeded.append(key)
    return seeded

#endregion === Helpers ===


# Runs the layout state machine for one block instance. Resets/seeds layout-specific attributes in place when the
# layout differs from the last one recorded in `memory`, and handles the first-time border style for borderless
# layouts. Returns True if a layout transition was processed.
def apply_layout_defaults(config, instance_id, memory: LayoutMemory) -> bool:
    raw_layout = config.get("counterLayout")
    layout = LayoutKind.parse(raw_layout)
    previous = memory.last_layout(instance_id)
    transitioned = previous != raw_layout

    if transitioned:
        if layout in RESET_LAYOUTS:
            _null_families(config, RADIUS_FAMILIES + SHADOW_FAMILIES)
            for bp in Breakpoint:
                config[f"boxBorderRadiusUnit{bp.suffix}"] = "%"

        seeded = []
        if layout == LayoutKind.LAYOUT1:
            seeded += _seed(config, LAYOUT1_DEFAULTS)
        if layout in BORDERED_LAYOUTS:
            seeded += _seed(config, BORDERED_DEFAULTS)
            if not config.get("boxBorderStyle") or config.get("boxBorderStyle") == "none":
                config["boxBorderStyle"] = "solid"
                seeded.append("boxBorderStyle")

        log.debug(f"Layout transition for '{instance_id}': {previous!r} -> {raw_layout!r}, seeded {seeded}")

    if layout in BORDERLESS_LAYOUTS:
        if not memory.border_style_applied(instance_id):
            config["boxBorderStyle"] = "none"
            _null_families(config, BORDER_FAMILIES)
            memory.set_border_style_applied(instance_id, True)
            log.debug(f"Applied initial borderless style for '{instance_id}'")

        # User turned the border back on, make sure every width has a number.
        if config.get("boxBorderStyle") == "solid":
            for name in BORDER_FAMILIES:
                fam = config.family(name)
                for bp in Breakpoint:
                    if fam.get(bp) is None:
                        fam.set(bp, 0)
    else:
        memory.set_border_style_applied(instance_id, False)

    memory.record(instance_id, raw_layout)
    return transitioned
