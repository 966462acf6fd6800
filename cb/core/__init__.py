# Style engine core: attributes, responsive resolution, layout defaults, CSS synthesis and the counter animator.
from .attributes import ATTRIBUTES, SCHEMA, Breakpoint, Configuration, Kind, Responsive, build_default_configuration
from .responsive import ResponsiveRef, active_breakpoint, edit_attribute, resolve
from .layout import LayoutKind, LayoutMemory, apply_layout_defaults
from .minify import minify
from .styles import scope_class_for, synthesize
from .animator import AnimatorState, CounterAnimator, Frame
from .validation import ValidationResult, validate_counter_range
from .markup import counter_data, read_counter_data, render_block

__all__ = [
    "ATTRIBUTES", "SCHEMA", "Breakpoint", "Configuration", "Kind", "Responsive", "build_default_configuration",
    "ResponsiveRef", "active_breakpoint", "edit_attribute", "resolve",
    "LayoutKind", "LayoutMemory", "apply_layout_defaults",
    "minify",
    "scope_class_for", "synthesize",
    "AnimatorState", "CounterAnimator", "Frame",
    "ValidationResult", "validate_counter_range",
    "counter_data", "read_counter_data", "render_block",
]
