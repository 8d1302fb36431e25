from pydantic import BaseModel, model_validator


class AuthorSummaryDto(BaseModel):
    id: int
    name: str | None = None
    image: str | None = None

    class Config:
        from_attributes = True


class PartialUpdate(BaseModel):
    """Base for PATCH bodies.

    Only fields present in the request are applied, so "absent" is read
    from ``model_fields_set`` rather than from the value. None of the
    stored columns is nullable, so a field sent as ``null`` is rejected
    with a validation error instead of being read as "keep the stored
    value"; clients that want to keep a value leave the field out.
    """

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(f for f in self.model_fields_set if getattr(self, f) is None)
        if nulls:
            raise ValueError(f"Fields may be omitted but not null: {', '.join(nulls)}")
        return self

    def provided_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)
