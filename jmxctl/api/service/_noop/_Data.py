"""No-op backend configuration data."""

from pydantic import BaseModel, ConfigDict


class _Data(BaseModel):
    """The no-op backend takes no settings."""

    model_config = ConfigDict(extra="forbid")
