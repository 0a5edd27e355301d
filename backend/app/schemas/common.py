"""
Shared schema pieces.
"""

from typing import ClassVar, Tuple
from pydantic import BaseModel, model_validator


class UpdateSchema(BaseModel):
    """
    Partial-update payload.

    Omitted fields are left alone. Fields listed in `non_nullable` map to
    NOT NULL columns, so an explicit null for them is rejected instead of
    reaching the database.
    """
    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode='after')
    def reject_nulls(self):
        nulled = [
            field for field in self.non_nullable
            if field in self.model_fields_set and getattr(self, field) is None
        ]
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self
