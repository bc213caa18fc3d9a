"""Pydantic model for update options."""
from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

class UpdateOptions(BaseModel):
    """Formatting and targeting options shared by all update operations."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    keep_array_indent: bool = Field(default=False, alias='keepArrayIndent')
    update_all: bool = Field(default=False, alias='updateAll')

    @classmethod
    def coerce(cls, options: Optional[Union["UpdateOptions", Dict[str, Any]]]) -> "UpdateOptions":
        """Build options from ``None``, an existing instance or a plain dict.

        Args:
            options: Options in any accepted form. Dict keys may use either
                the field names or their camelCase aliases.

        Returns:
            UpdateOptions: Validated options.

        Raises:
            ValidationError: If a dict contains invalid values.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)
