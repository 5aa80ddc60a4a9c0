"""SysV init specific service configuration data."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """SysV init restart configuration data."""

    model_config = ConfigDict(extra="forbid")

    command: str = Field("service", description="Wrapper used as '<command> <unit> restart'")
