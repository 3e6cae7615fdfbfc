"""Automatic HTML escaping of untrusted text in templates."""

from __future__ import annotations

import jinja2
from markupsafe import Markup

_TEMPLATE = jinja2.Environment(autoescape=True).from_string(
    "<p>A: {{ a }}</p><p>B: {{ b }}</p>"
)


def render(a: str, b: str) -> str:
    """Render a as untrusted text and b as trusted HTML."""
    return _TEMPLATE.render(a=a, b=Markup(b))


def main(argv: list[str] | None = None) -> int:
    print(render("<b>Hello!</b>", "<b>Hello!</b>"), end="")
    return 0