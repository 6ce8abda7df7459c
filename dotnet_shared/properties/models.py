# Pydantic data models for property declarations: PropertyDefinition, PropertyType, Qualifier.

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, model_validator


class PropertyType(str, Enum):
    """Value type the host validates a setting against."""

    STRING = "STRING"
    BOOLEAN = "BOOLEAN"


class Qualifier(str, Enum):
    """Host component scopes a setting can be configured on."""

    PROJECT = "TRK"


class PropertyDefinition(BaseModel):
    """One user-configurable setting registered with the host (key, default, UI grouping)."""

    key: str
    type: PropertyType = PropertyType.STRING
    default_value: Optional[str] = None
    multi_values: bool = Field(default=False, description="Value is a comma-separated list")
    hidden: bool = False
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    sub_category: Optional[str] = None
    index: Optional[int] = Field(None, ge=0, description="Display order within the sub-category")
    qualifiers: Tuple[Qualifier, ...] = ()

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_display_metadata(self) -> "PropertyDefinition":
        if self.hidden:
            if self.name is not None or self.description is not None:
                raise ValueError(f"Hidden property {self.key} must not have a name or description")
        elif self.name is None or self.description is None:
            raise ValueError(f"Visible property {self.key} needs both a name and a description")
        return self
