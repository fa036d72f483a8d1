"""Storage configuration schema."""
from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """
    Storage configuration.

    The strategy is checked against the user repository registry when the
    application starts, not here, so new storage variants need no schema change.
    """

    strategy: str = Field("sqlite", description="User repository variant (memory, sqlite)")
    sqlite_path: str = Field(
        "${PATTERNKIT_WORKDIR:.}/patternkit.db", description="SQLite database file"
    )

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Storage strategy must not be empty")
        return v.strip()
