# Every block attribute is declared once in ATTRIBUTES. Responsive attributes expand into three concrete keys
# (...Desktop, ...Tablet, ...Mobile) and are stored together as a Responsive struct, so a family is never partial.

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Kind(str, Enum):
    NUMBER = "number"
    STRING = "string"


class Breakpoint(str, Enum):
    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"

    # The suffix used by concrete attribute keys, e.g. "Tablet" in boxTPaddingTablet
    @property
    def suffix(self):
        return self.value.capitalize()

    # Unknown or missing values always fall back to desktop.
    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.DESKTOP


# One value per breakpoint for a single logical attribute family.
@dataclass
class Responsive:
    desktop: Any = None
    tablet: Any = None
    mobile: Any = None

    def get(self, breakpoint):
        return getattr(self, Breakpoint.parse(breakpoint).value)

    def set(self, breakpoint, value):
        setattr(self, Breakpoint.parse(breakpoint).value, value)

    def items(self):
        return [(bp, self.get(bp)) for bp in Breakpoint]


@dataclass(frozen=True)
class AttributeSpec:
    name: str
    kind: Kind
    default: Any = None
    responsive: bool = False

    # Concrete flat keys this attribute occupies in a serialized configuration.
    def keys(self):
        if not self.responsive:
            return [self.name]
        return [f"{self.name}{bp.suffix}" for bp in Breakpoint]

    def build_default(self):
        if not self.responsive:
            return copy.deepcopy(self.default)
        desktop, tablet, mobile = self.default if self.default is not None else (None, None, None)
        return Responsive(desktop, tablet, mobile)


def _scalar(name, kind, default=None):
    return AttributeSpec(name, kind, default)

def _responsive(name, kind, desktop=None, tablet=None, mobile=None):
    return AttributeSpec(name, kind, (desktop, tablet, mobile), responsive=True)

def _same(name, kind, value):
    return _responsive(name, kind, value, value, value)

N = Kind.NUMBER
S = Kind.STRING

#region === Schema ===

ATTRIBUTES = [
    # Content + animation inputs
    _scalar("counterLabel", S, "Counter"),
    _scalar("start", N, 0),
    _scalar("end", N, 100),
    _scalar("duration", N, 2000),
    _scalar("counterNumberPrefix", S, ""),
    _scalar("counterNumberSuffix", S, "+"),
    _scalar("counterLayout", S, "layout1"),
    # Global breakpoint toggle for editing, never rendered
    _scalar("counterNumberResponsive", S, "desktop"),

    # Counter number typography
    _scalar("counterNumberFontFamily", S, "Roboto"),
    _responsive("counterNumberFontSize", N, 36, 30, 24),
    _same("counterNumberFontSizeUnit", S, "px"),
    _same("counterNumberFontLineHeight", N, 1),
    _same("counterNumberFontLineHeightUnit", S, "em"),
    _scalar("counterNumberFontWeight", S, "500"),
    _scalar("counterNumberFontStyle", S, "normal"),
    _same("counterNumberFontAlign", S, "center"),
    _scalar("counterNumberColor", S, "#df00ff"),
    _scalar("counterNumberBgColor", S, "#ffffff"),
    _scalar("counterNumberLoaderColor", S, "#df00ff"),

    # Counter label typography
    _scalar("counterLabelFontFamily", S, "lato"),
    _responsive("counterLabelFontSize", N, 36, 30, 24),
    _same("counterLabelFontSizeUnit", S, "px"),
    _same("counterLabelFontLineHeight", N, 1),
    _same("counterLabelFontLineHeightUnit", S, "em"),
    _scalar("counterLabelFontWeight", S, "500"),
    _scalar("counterLabelFontStyle", S, "normal"),
    _same("counterLabelFontAlign", S, "center"),
    _scalar("counterLabelFontTextTransform", S, "none"),
    _scalar("counterLabelColor", S, "#df00ff"),

    # Box
    _scalar("backgroundColor", S, "#fff"),
    _responsive("boxBorderTRadius", N),
    _responsive("boxBorderLRadius", N),
    _responsive("boxBorderBRadius", N),
    _responsive("boxBorderRRadius", N),
    _same("boxBorderRadiusUnit", S, "%"),
    _scalar("boxBorderStyle", S),
    _responsive("boxBorderT", N),
    _responsive("boxBorderL", N),
    _responsive("boxBorderB", N),
    _responsive("boxBorderR", N),
    _same("boxBorderUnit", S, "px"),
    _scalar("boxBorderColor", S, "#df00ff"),
    _responsive("boxTPadding", N, "35", "25", "40"),
    _responsive("boxLPadding", N, "45", "25", "30"),
    _responsive("boxBPadding", N, "35", "25", "40"),
    _responsive("boxRPadding", N, "45", "25", "30"),
    _same("boxPaddingUnit", S, "px"),
    _responsive("boxBoxshadowHoffset", N),
    _responsive("boxBoxshadowVoffset", N),
    _responsive("boxBoxshadowBlur", N),
    _responsive("boxBoxshadowSpread", N),
    _same("boxBoxshadowUnit", S, "px"),
    _scalar("boxBoxshadowColor", S),
    _scalar("boxBackgroundImage", S, ""),
    _same("boxBackgroundImagePosition", S, "center center"),
    _scalar("boxBackgroundImageAttachment", S, "scroll"),
    _scalar("boxBackgroundImageRepeat", S, "no-repeat"),
    _responsive("boxBackgroundImageDisplaySize", S, "contain", "cover", "cover"),
    _scalar("boxAnimation", S, ""),

    # Image
    _scalar("imageUrl", S, ""),
    _responsive("imageWidth", N, 50, 40, 30),
    _same("imageWidthUnit", S, "px"),
    _responsive("imageHeight", N, 50, 40, 30),
    _same("imageHeightUnit", S, "px"),
    _same("imageDisplaySize", S, "contain"),
    _responsive("imageBorderTRadius", N),
    _responsive("imageBorderLRadius", N),
    _responsive("imageBorderBRadius", N),
    _responsive("imageBorderRRadius", N),
    _same("imageBorderRadiusUnit", S, "px"),
    _responsive("imageBorderT", N),
    _responsive("imageBorderL", N),
    _responsive("imageBorderB", N),
    _responsive("imageBorderR", N),
    _same("imageBorderUnit", S, "px"),
    _scalar("imageBorderStyle", S, "none"),
    _scalar("imageBorderColor", S),

    _scalar("clientId", S, ""),
]

SCHEMA = {spec.name: spec for spec in ATTRIBUTES}

#endregion === Schema ===


# Splits a concrete key like "boxTPaddingTablet" into ("boxTPadding", Breakpoint.TABLET). Returns None for anything
# that isn't a responsive family key.
def split_key(key):
    for bp in Breakpoint:
        if key.endswith(bp.suffix):
            base = key[:-len(bp.suffix)]
            spec = SCHEMA.get(base)
            if spec is not None and spec.responsive:
                return base, bp
    return None


# The full attribute record of one block instance. Readable and writable by flat concrete key
# (config["boxTPaddingTablet"]) or by family (config.family("boxTPadding").tablet). Keys that aren't in the schema are
# kept as plain scalars so nothing is lost on a round trip.
class Configuration:

    def __init__(self, values=None):
        self._scalars = {}
        self._families = {}
        for spec in ATTRIBUTES:
            if spec.responsive:
                self._families[spec.name] = spec.build_default()
            else:
                self._scalars[spec.name] = spec.build_default()
        if values:
            self.update(values)

    def family(self, name) -> Responsive:
        try:
            return self._families[name]
        except KeyError:
            raise KeyError(f"'{name}' is not a responsive attribute family") from None

    def is_family(self, name):
        return name in self._families

    def __getitem__(self, key):
        if key in self._scalars:
            return self._scalars[key]
        parts = split_key(key)
        if parts is None:
            raise KeyError(key)
        base, bp = parts
        return self._families[base].get(bp)

    def __setitem__(self, key, value):
        parts = split_key(key)
        if parts is not None:
            base, bp = parts
            self._families[base].set(bp, value)
        elif key in self._families:
            raise KeyError(f"'{key}' is a responsive family, set one of its breakpoint keys instead")
        else:
            self._scalars[key] = value

    def __contains__(self, key):
        return key in self._scalars or split_key(key) is not None

    def get(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            return default

    def update(self, values):
        for key, value in dict(values).items():
            self[key] = value

    def keys(self):
        return list(self.to_dict().keys())

    # Flat mapping in schema order, unknown scalars last.
    def to_dict(self):
        flat = {}
        for spec in ATTRIBUTES:
            if spec.responsive:
                fam = self._families[spec.name]
                for bp in Breakpoint:
                    flat[f"{spec.name}{bp.suffix}"] = fam.get(bp)
            else:
                flat[spec.name] = self._scalars[spec.name]
        for key, value in self._scalars.items():
            if key not in SCHEMA:
                flat[key] = value
        return flat

    def copy(self):
        return Configuration(copy.deepcopy(self.to_dict()))

    def __eq__(self, other):
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Configuration(layout={self._scalars.get('counterLayout')!r}, clientId={self._scalars.get('clientId')!r})"


# Helper to return a truly fresh, default configuration.
def build_default_configuration(**overrides):
    config = Configuration()
    config.update(overrides)
    return config
