from __future__ import annotations

"""treelette.utils.templates
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Uses Jinja2 for the fixed textual lines (e.g. the total price line).

Usage
-----
>>> from treelette.utils.templates import render
>>> render("Total is {{ total }}", {"total": 1690})
'Total is 1690'
"""

from typing import Any, Mapping
from jinja2 import Environment, StrictUndefined

__all__ = ["render", "TOTAL_TEMPLATE"]

TOTAL_TEMPLATE = "Total is {{ total }}"

# StrictUndefined raises for variables missing from *data*
env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
)


def render(template_string: str, data: Mapping[str, Any]) -> str:  # noqa: D401
    """Render the *template_string* with *data* using Jinja2.

    Raises:
        RuntimeError: wrapping any jinja2 undefined-variable or syntax error,
            with the template and the available keys for context.
    """
    try:
        template = env.from_string(template_string)
        return template.render(data)
    except Exception as exc:
        raise RuntimeError(
            f"Error rendering template: {exc}\n"
            f"Template: \"{template_string[:100]}{'...' if len(template_string) > 100 else ''}\"\n"
            f"Data keys: {list(data.keys())}"
        ) from exc
