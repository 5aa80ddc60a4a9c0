"""systemd specific service configuration data."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """systemd restart configuration data."""

    model_config = ConfigDict(extra="forbid")

    user: bool = Field(False, description="Talk to the user service manager (systemctl --user)")
    unit_suffix: str = Field(".service", description="Suffix appended to bare unit names")
