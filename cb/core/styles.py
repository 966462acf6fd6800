# Stylesheet synthesis for a single counter block instance. synthesize() is the one function both the editor preview
# and the saved markup use. Output order is fixed: font imports, base box rule, layout blocks (layout1 then layout3),
# image rule, typography, then the tablet and mobile media queries.
#
# Declarations are only emitted when their source values are truthy, so a 0 suppresses a declaration exactly like an
# unset value does.

from urllib.parse import quote
from cb.common.logger import log
from cb.core.attributes import Breakpoint
from cb.core.layout import LayoutKind, LayoutMemory, apply_layout_defaults
from cb.core.minify import minify
from cb.util import format_number

FONT_IMPORT_URL = "https://fonts.googleapis.com/css?family={family}"
TABLET_MAX_WIDTH = 1024
MOBILE_MAX_WIDTH = 767

# Side order for every four-sided shorthand: top, right, bottom, left.
BOX_PADDING = ("boxTPadding", "boxRPadding", "boxBPadding", "boxLPadding")
BOX_BORDER = ("boxBorderT", "boxBorderR", "boxBorderB", "boxBorderL")
BOX_RADIUS = ("boxBorderTRadius", "boxBorderRRadius", "boxBorderBRadius", "boxBorderLRadius")
BOX_SHADOW = ("boxBoxshadowHoffset", "boxBoxshadowVoffset", "boxBoxshadowBlur", "boxBoxshadowSpread")
IMAGE_BORDER = ("imageBorderT", "imageBorderR", "imageBorderB", "imageBorderL")
IMAGE_RADIUS = ("imageBorderTRadius", "imageBorderRRadius", "imageBorderBRadius", "imageBorderLRadius")


# Builds the scope class for a block from its client id.
def scope_class_for(client_id):
    return f"block-{client_id}"


#region === Value helpers ===

def _dim(value, unit):
    if value is None or value == "":
        return None
    return f"{format_number(value)}{unit or ''}"

def _decl(prop, value):
    if value is None or value == "":
        return ""
    return f"{prop}: {value};"

# Returns an empty string for rules without any declarations, so they never reach the output.
def _rule(selector, *declarations):
    body = " ".join(d for d in declarations if d)
    if not body:
        return ""
    return f"{selector} {{ {body} }}"

def _media(max_width, *rules):
    body = "\n".join(r for r in rules if r)
    if not body:
        return ""
    return f"@media (max-width: {max_width}px) {{\n{body}\n}}"

# Reads one breakpoint's worth of values out of a configuration.
class _View:

    def __init__(self, config, breakpoint):
        self.config = config
        self.bp = Breakpoint.parse(breakpoint)

    def __getitem__(self, key):
        return self.config.get(key)

    def at(self, name):
        return self.config.family(name).get(self.bp)

    def dim(self, name, unit_name):
        return _dim(self.at(name), self.at(unit_name))

    def any(self, names):
        return any(self.at(n) for n in names)

    def all(self, names):
        return all(self.at(n) for n in names)

    # Four-sided shorthand. A missing side prints as 0 rather than as garbage.
    def sides(self, names, unit_name):
        unit = self.at(unit_name)
        return " ".join(_dim(self.at(n), unit) or "0" for n in names)

#endregion === Value helpers ===


#region === Sections ===

def _font_imports(v):
    imports = []
    for key in ("counterLabelFontFamily", "counterNumberFontFamily"):
        family = v[key]
        if family:
            url = FONT_IMPORT_URL.format(family=quote(str(family).strip().replace(" ", "+"), safe=":,+"))
            imports.append(f"@import url('{url}');")
    return imports

def _background_image(v, full):
    if not v["boxBackgroundImage"]:
        return []
    decls = []
    if full:
        decls.append(_decl("background-image", f"url('{v['boxBackgroundImage']}')"))
    decls.append(_decl("background-position", v.at("boxBackgroundImagePosition")))
    if full:
        decls.append(_decl("background-attachment", v["boxBackgroundImageAttachment"]))
        decls.append(_decl("background-repeat", v["boxBackgroundImageRepeat"]))
    decls.append(_decl("background-size", v.at("boxBackgroundImageDisplaySize")))
    return decls

def _padding(v):
    if not v.any(BOX_PADDING):
        return ""
    return _decl("padding", v.sides(BOX_PADDING, "boxPaddingUnit"))

def _radius(v, names=BOX_RADIUS, unit_name="boxBorderRadiusUnit"):
    if not v.any(names):
        return ""
    return _decl("border-radius", v.sides(names, unit_name))

def _shadow(v):
    shadow = v.sides(BOX_SHADOW, "boxBoxshadowUnit")
    if v["boxBoxshadowColor"]:
        shadow = f"{shadow} {v['boxBoxshadowColor']}"
    return _decl("box-shadow", shadow)

def _box_rule(v, scope):
    style = v["boxBorderStyle"]
    decls = [_decl("background-color", v["backgroundColor"]), _padding(v)]
    if style and style != "none":
        decls += [
            _decl("border-width", v.sides(BOX_BORDER, "boxBorderUnit")),
            _decl("border-color", v["boxBorderColor"]),
            _decl("border-style", style),
        ]
    if v["boxBoxshadowColor"]:
        decls.append(_shadow(v))
    decls += _background_image(v, full=True)
    decls.append(_radius(v))
    return _rule(f".{scope}.zlgcb-counter-box", *decls)

def _layout1_rules(v, scope):
    return [
        _rule(".zlgcb-circle-container",
              "position: relative;", "width: 100%;", "max-width: 150px;", "aspect-ratio: 1 / 1;",
              "border-radius: 50%;", "margin: 0 auto;", "overflow: hidden;"),
        _rule(".zlgcb-circle-fill",
              "background-image: linear-gradient(90deg, transparent 50%, white 50%), "
              "linear-gradient(90deg, white 50%, transparent 50%);"),
        _rule(".zlgcb-counter-number-layout-1 h2",
              "position: absolute;", "left: 9px;", "top: 9px;", "display: flex;", "align-items: center;",
              "justify-content: center;", "margin: 0 auto;", "width: calc(100% - 20px);",
              "height: calc(100% - 20px);", "border-radius: 50%;"),
        _rule(f".{scope} .zlgcb-counter-number-layout-1", "margin: 20px auto 20px;"),
        _rule(f".{scope} .zlgcb-counter-number-layout-1 h2",
              _decl("background-color", v["counterNumberBgColor"]),
              _decl("border", f"2px solid {v['counterNumberLoaderColor']}" if v["counterNumberLoaderColor"] else None)),
    ]

def _layout3_rules(v, scope):
    box = f".{scope}.zlgcb-counter-box-layout-3"
    data = f".{scope} .zlgcb-counter-data-layout-3"
    rules = [
        _rule(f".{scope}.zlgcb-counter-box.zlgcb-counter-box-layout-3",
              "position: relative;", "z-index: 1;", "padding: 0;"),
        _rule(f"{box}::before, {box}::after",
              'content: "";',
              _decl("background", f"linear-gradient(135deg, {v['counterLabelColor']} 45%, rgba(0,0,0,1) 100%)"),
              "position: absolute;", "top: 10px;", "left: 10px;", "right: 0;", "bottom: 0;", "z-index: -1;",
              "height: calc(100% + 10px);", "width: calc(100% + 10px);",
              _radius(v)),
        _rule(f"{box}:after",
              "background: transparent;", "border: 2px dashed rgba(255,255,255,0.5);", "top: -2px;", "left: -3px;"),
        _rule(data,
              "position: relative;",
              _decl("background-color", v["backgroundColor"]),
              "height: 100%;",
              _decl("padding", v.sides(BOX_PADDING, "boxPaddingUnit")),
              _radius(v),
              *_background_image(v, full=True)),
    ]
    # Fold triangles only make sense on a box whose corners aren't all rounded
    if not v.all(BOX_RADIUS):
        rules.append(_rule(f"{data}:before, {data}:after",
                           "content: '';",
                           "background: linear-gradient(to top right, #050006 50%, transparent 52%);",
                           "height: 10px;", "width: 10px;", "position: absolute;", "right: -10px;", "top: 0;"))
    rules.append(_rule(f"{data}:after",
                       "transform: rotate(180deg);", "top: auto;", "bottom: -10px;", "right: auto;", "left: 0;"))
    return rules

def _image_rule(v, scope, full):
    if not v["imageUrl"]:
        return ""
    decls = []
    if full:
        decls += ["display: block;", "margin: 0 auto 10px;"]
    decls += [
        _decl("width", v.dim("imageWidth", "imageWidthUnit")),
        _decl("height", v.dim("imageHeight", "imageHeightUnit")),
        _decl("object-fit", v.at("imageDisplaySize")),
        _radius(v, IMAGE_RADIUS, "imageBorderRadiusUnit"),
    ]
    if v.any(IMAGE_BORDER):
        decls.append(_decl("border-width", v.sides(IMAGE_BORDER, "imageBorderUnit")))
    if full:
        decls.append(_decl("border-color", v["imageBorderColor"]))
        decls.append(_decl("border-style", v["imageBorderStyle"]))
    return _rule(f".{scope} .zlgcb-counter-img", *decls)

def _typography_rules(v, scope, full):
    number = [
        _decl("font-size", v.dim("counterNumberFontSize", "counterNumberFontSizeUnit")),
        _decl("line-height", v.dim("counterNumberFontLineHeight", "counterNumberFontLineHeightUnit")),
        _decl("text-align", v.at("counterNumberFontAlign")),
    ]
    label = [
        _decl("font-size", v.dim("counterLabelFontSize", "counterLabelFontSizeUnit")),
        _decl("line-height", v.dim("counterLabelFontLineHeight", "counterLabelFontLineHeightUnit")),
        _decl("text-align", v.at("counterLabelFontAlign")),
    ]
    if not full:
        return [_rule(f".{scope} .zlgcb-counter-number", *number),
                _rule(f".{scope} .zlgcb-counter-label", *label)]

    return [
        _rule(".zlgcb-counter-number", "margin: 0 0 15px;"),
        _rule(f".{scope} .zlgcb-counter-number",
              _decl("font-family", v["counterNumberFontFamily"]),
              *number[:2],
              _decl("font-weight", v["counterNumberFontWeight"]),
              _decl("font-style", v["counterNumberFontStyle"]),
              number[2],
              _decl("color", v["counterNumberColor"])),
        _rule(".zlgcb-counter-label", "margin: 0 !important;"),
        _rule(f".{scope} .zlgcb-counter-label",
              _decl("font-family", v["counterLabelFontFamily"]),
              *label,
              _decl("font-weight", v["counterLabelFontWeight"]),
              _decl("font-style", v["counterLabelFontStyle"]),
              _decl("text-transform", v["counterLabelFontTextTransform"]),
              _decl("color", v["counterLabelColor"])),
    ]

# Overrides for one smaller breakpoint. Only declarations that actually have per-breakpoint values show up here.
def _breakpoint_rules(v, scope, layout):
    box = [_padding(v)]
    if v.any(BOX_BORDER):
        box.append(_decl("border-width", v.sides(BOX_BORDER, "boxBorderUnit")))
    if v.any(BOX_SHADOW):
        box.append(_shadow(v))
    box += _background_image(v, full=False)
    box.append(_radius(v))

    rules = [_rule(f".{scope}.zlgcb-counter-box", *box)]
    if layout == LayoutKind.LAYOUT3:
        rules.append(_rule(f".{scope} .zlgcb-counter-data-layout-3",
                           _padding(v), _radius(v), *_background_image(v, full=False)))
    rules.append(_image_rule(v, scope, full=False))
    rules += _typography_rules(v, scope, full=False)
    return rules

#endregion === Sections ===


# Generates the minified stylesheet for one block instance. Runs the layout defaults engine against `memory` first,
# which may mutate `config` in place when the layout changed since the last call for this scope.
def synthesize(config, scope_class, memory: LayoutMemory) -> str:
    apply_layout_defaults(config, scope_class, memory)
    layout = LayoutKind.parse(config.get("counterLayout"))

    desktop = _View(config, Breakpoint.DESKTOP)
    parts = _font_imports(desktop)
    parts.append(_box_rule(desktop, scope_class))
    if layout == LayoutKind.LAYOUT1:
        parts += _layout1_rules(desktop, scope_class)
    if layout == LayoutKind.LAYOUT3:
        parts += _layout3_rules(desktop, scope_class)
    parts.append(_image_rule(desktop, scope_class, full=True))
    parts += _typography_rules(desktop, scope_class, full=True)
    parts.append(_media(TABLET_MAX_WIDTH, *_breakpoint_rules(_View(config, Breakpoint.TABLET), scope_class, layout)))
    parts.append(_media(MOBILE_MAX_WIDTH, *_breakpoint_rules(_View(config, Breakpoint.MOBILE), scope_class, layout)))

    css = minify("\n".join(p for p in parts if p))
    log.debug(f"Synthesized {len(css)} chars of CSS for '{scope_class}' ({config.get('counterLayout')})")
    return css
