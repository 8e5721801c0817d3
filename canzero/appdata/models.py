from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from canzero.common.toml_utils import dump_toml, load_toml


class AppDataModel(BaseModel):
    """Persisted per-user settings record."""

    model_config = ConfigDict(extra='ignore')

    config_path: Optional[Path] = Field(default=None, description='Absolute path to the external configuration file')

    @field_validator('config_path')
    @classmethod
    def validate_config_path(cls, v: Optional[Path]) -> Optional[Path]:
        """Reject empty and relative paths; an empty string would otherwise load as ``Path('.')``."""
        if v is not None and not v.is_absolute():
            raise ValueError(f'config_path must be an absolute path, got {str(v)!r}')
        return v

    @classmethod
    def from_toml(cls, text: str) -> 'AppDataModel':
        """Parse a record from TOML text.

        Raises:
            ValueError: If the text is not valid TOML or not the record shape
                (pydantic's ValidationError is a ValueError)
        """
        return cls.model_validate(load_toml(text))

    def to_toml(self) -> str:
        """Render the record as TOML text, omitting unset fields."""
        return dump_toml(self.model_dump(mode='json', exclude_none=True))
