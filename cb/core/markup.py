# Block markup rendering and the data-attribute contract read by the animator.
#
# The root element carries exactly six data fields: data-start, data-end, data-duration (integers), data-prefix,
# data-suffix (strings) and data-loader-color (a color, loaderColor in the dataset).

from jinja2 import DictLoader, Environment, select_autoescape
from cb.core.layout import LayoutKind
from cb.core.responsive import parse_number
from cb.core.styles import synthesize

DEFAULT_LOADER_COLOR = "#df00ff"

# Class suffix per layout for each wrapper level
_BOX_CLASS = "zlgcb-counter-box-{n}"
_DATA_CLASS = "zlgcb-counter-data-{n}"
_NUMBER_CLASS = "zlgcb-counter-number-{n}"
_LABEL_CLASS = "zlgcb-counter-label-{n}"

DATA_FIELDS = {
    "start": "data-start",
    "end": "data-end",
    "duration": "data-duration",
    "prefix": "data-prefix",
    "suffix": "data-suffix",
    "loaderColor": "data-loader-color",
}

# The stylesheet is already minified CSS and goes into the <style> element as-is, everything else is escaped.
BLOCK_TEMPLATE = """\
<div class="{{ box_classes|join(' ') }}"{% for name, value in data_attributes %} {{ name }}="{{ value }}"{% endfor %}>
<div class="{{ data_class }}">
{% if image_url %}
<div class="zlgcb-counter-img-container"><img src="{{ image_url }}" class="zlgcb-counter-img"></div>
{% endif %}
<div class="{{ number_classes|join(' ') }}"{% if number_style %} style="{{ number_style }}"{% endif %}><h2 class="zlgcb-counter-number">{{ number_text }}</h2></div>
<div class="{{ label_class }}"><h3 class="zlgcb-counter-label">{{ label }}</h3></div>
<style class="dynamic-counter-styles">{{ css|safe }}</style>
</div>
</div>
"""


def _jinja_env() -> Environment:
    return Environment(
        loader=DictLoader({"block.html": BLOCK_TEMPLATE}),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )

_ENV = _jinja_env()


def _layout_class(template, layout):
    if layout is None:
        return ""
    return template.format(n=layout.value.replace("layout", "layout-"))

def _text(value):
    return "" if value is None else str(value)

def _int(value, default):
    parsed = parse_number(value)
    return default if parsed is None else int(parsed)


# The six values the front-end animator needs, straight from a configuration.
def counter_data(config):
    return {
        "start": _int(config.get("start"), 0),
        "end": _int(config.get("end"), 100),
        "duration": _int(config.get("duration"), 2000),
        "prefix": _text(config.get("counterNumberPrefix")),
        "suffix": _text(config.get("counterNumberSuffix")),
        "loaderColor": _text(config.get("counterNumberLoaderColor")) or DEFAULT_LOADER_COLOR,
    }


# Reads animator inputs back out of a rendered element's attributes. Accepts either the full attribute names
# ("data-start") or dataset names ("start"); anything missing or unparseable gets the block default.
def read_counter_data(attributes):
    def pick(field):
        if DATA_FIELDS[field] in attributes:
            return attributes[DATA_FIELDS[field]]
        return attributes.get(field)

    return {
        "start": _int(pick("start"), 0),
        "end": _int(pick("end"), 100),
        "duration": _int(pick("duration"), 2000),
        "prefix": _text(pick("prefix")),
        "suffix": _text(pick("suffix")),
        "loaderColor": _text(pick("loaderColor")) or DEFAULT_LOADER_COLOR,
    }


# Renders the whole block, style element included. Preview and saved output both go through here.
def render_block(config, scope_class, memory) -> str:
    css = synthesize(config, scope_class, memory)
    layout = LayoutKind.parse(config.get("counterLayout"))
    data = counter_data(config)

    box_classes = ["zlgcb-counter-box"]
    animation = config.get("boxAnimation")
    if animation and animation != "none":
        box_classes += ["zlgcb-animate", animation]
    box_classes += [_layout_class(_BOX_CLASS, layout), scope_class]

    number_classes = [_layout_class(_NUMBER_CLASS, layout)]
    number_style = ""
    if layout == LayoutKind.LAYOUT1:
        number_classes += ["zlgcb-circle-container", "zlgcb-circle-fill"]
        number_style = f"background-color: {data['loaderColor']}; border: 2px solid {data['loaderColor']};"

    return _ENV.get_template("block.html").render(
        box_classes=[c for c in box_classes if c],
        data_attributes=[(DATA_FIELDS[key], value) for key, value in data.items()],
        data_class=_layout_class(_DATA_CLASS, layout),
        image_url=config.get("imageUrl"),
        number_classes=[c for c in number_classes if c],
        number_style=number_style,
        number_text=f"{data['prefix']} {data['end']} {data['suffix']}",
        label_class=_layout_class(_LABEL_CLASS, layout),
        label=_text(config.get("counterLabel")),
        css=css,
    )
