"""Model describing a roleplay persona."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Persona(BaseModel):
    """A predefined character the model is asked to play.

    Personas are created once from the seed list and are frozen, so the
    same instance can be shared by every request.
    """

    id: str = Field(..., min_length=1)
    name: str
    avatar_ref: str = Field(
        ...,
        validation_alias=AliasChoices("avatarRef", "avatar_ref", "avatar"),
        serialization_alias="avatarRef",
    )
    category: str
    description: str
    personality: str

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
