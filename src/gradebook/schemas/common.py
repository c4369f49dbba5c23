# File: src/gradebook/schemas/common.py
from pydantic import BaseModel, ValidationInfo, field_validator


class PartialUpdate(BaseModel):
    """
    Base for update payloads. A field left out is not touched; a field sent as
    null is rejected because every updatable column is required.
    Apply with `payload.model_dump(exclude_unset=True)`.
    """

    @field_validator("*")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value
