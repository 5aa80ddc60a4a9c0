"""Render managed file bodies."""

from ...templating import render_template

HEADER = "# Managed by jmxctl for {{ service }}; local changes will be overwritten."

PROPERTIES_TEMPLATE = HEADER + """
{% for key, value in properties.items() %}
{{ key | prop_key }}={{ value | prop_value }}
{% endfor %}
"""

# jmxremote.password / jmxremote.access: one "<name> <value>" pair per line
PAIRS_TEMPLATE = HEADER + """
{% for name, value in pairs.items() %}
{{ name }} {{ value }}
{% endfor %}
"""


def render_properties(service: str, properties: dict[str, str]) -> str:
    return render_template(PROPERTIES_TEMPLATE, {"service": service, "properties": properties})


def render_pairs(service: str, pairs: dict[str, str]) -> str:
    return render_template(PAIRS_TEMPLATE, {"service": service, "pairs": pairs})
