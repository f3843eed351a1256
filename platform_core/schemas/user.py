"""User listing schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

USER_SORT_FIELDS = ("username", "first_name", "last_name", "created_at")


class UserSearchForm(BaseModel):
    """Filters for the user listing.

    Text filters match case-insensitively anywhere in the field. Blank
    strings are treated as no filter.
    """

    model_config = ConfigDict(frozen=True)

    username: str | None = Field(default=None, max_length=128)
    first_name: str | None = Field(default=None, max_length=128)
    last_name: str | None = Field(default=None, max_length=128)
    active: bool | None = None

    @field_validator("username", "first_name", "last_name", mode="before")
    @classmethod
    def blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value
