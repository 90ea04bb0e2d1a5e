"""
Message template rendering.

Templates name their properties in braces, optionally with a format spec:

    "Order {OrderId} shipped in {Elapsed:.1f} ms"

Placeholders without a matching property are left as they are.
"""

import re
from typing import Any, Mapping

PLACEHOLDER = re.compile(r"\{(\w+)(?::([^}]*))?\}")


def render_template(template: str, properties: Mapping[str, Any]) -> str:
    """
    Substitute placeholders with property values.

    Args:
        template: Message template
        properties: Values by property name

    Returns:
        Rendered message
    """
    def substitute(match: "re.Match[str]") -> str:
        name, fmt = match.group(1), match.group(2)
        if name not in properties:
            return match.group(0)
        value = properties[name]
        if fmt:
            try:
                return format(value, fmt)
            except (TypeError, ValueError):
                pass
        return str(value)

    return PLACEHOLDER.sub(substitute, template)
