"""Output schemas for jmx commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class JmxApplyOutput(BaseOutputSchema):
    """Output schema for jmx apply command.

    All fields must always be present for consistency.
    """

    services: list[dict[str, Any]] = Field(
        ..., description="Per-service results: name, ensure, changed (list of items), restarted"
    )
    changed: bool = Field(..., description="Whether any service was changed")


class JmxPlanOutput(BaseOutputSchema):
    """Output schema for jmx plan command."""

    service: str = Field(..., description="Service name")
    ensure: str = Field(..., description="'present' or 'absent'")
    properties: dict[str, str] = Field(..., description="Derived management properties, empty when absent")
    ssl_properties: dict[str, str] = Field(..., description="Properties written to ssl.properties")
    artifacts: list[dict[str, Any]] = Field(..., description="Managed files and directories")
    fragments: list[dict[str, Any]] = Field(..., description="Java argument fragments in the env file")


class JmxListOutput(BaseOutputSchema):
    """Output schema for jmx list command."""

    services: list[dict[str, Any]] = Field(..., description="Configured services with ensure, config_dir, env_file")
    count: int = Field(..., description="Number of configured services")


register_output_schema("jmx", "apply", JmxApplyOutput)
register_output_schema("jmx", "plan", JmxPlanOutput)
register_output_schema("jmx", "list", JmxListOutput)
