from typing import Annotated, NamedTuple

from pydantic import AliasChoices, Field

from .base import ConfigBaseModel

type Channel = Annotated[int, Field(ge=0, le=255)]


class Rgba(NamedTuple):
    red: Channel
    green: Channel
    blue: Channel
    alpha: Channel


class Material(ConfigBaseModel):
    """Surface appearance shared by every shape of a drawn object."""

    color: Rgba = Field(
        ...,
        description="Base colour; the alpha channel scales the coverage of the shape.",
        examples=[(255, 255, 255, 255), (179, 220, 214, 255)],
    )
    shininess: int = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("shininess", "shininess_exponent"),
        description="Exponent of the specular falloff; higher is a tighter highlight.",
        examples=[4, 7],
    )
    reflection_brightness: float = Field(
        ...,
        validation_alias=AliasChoices("reflection_brightness", "reflectivity"),
        description="Multiplier on the specular highlight intensity.",
        examples=[0.2, 1.0],
    )
