from pydantic import BaseModel, ConfigDict


class LeagueModel(BaseModel):
    """Shared configuration: league records are immutable value objects."""
    model_config = ConfigDict(frozen=True)
