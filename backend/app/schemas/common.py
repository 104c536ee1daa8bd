"""
Shared pydantic configuration for entity schemas.
"""
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, ClassVar, Dict, Tuple


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


class PartialModel(CamelModel):
    """
    Base for PATCH bodies.

    Every field is optional, but a field listed in ``non_nullable`` may only be
    omitted, never sent as null.
    """
    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @field_validator("*")
    @classmethod
    def reject_null_required(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name in cls.non_nullable:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Only the fields the client sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
