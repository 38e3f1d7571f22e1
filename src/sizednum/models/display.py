from __future__ import annotations
from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field

class HexOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    uppercase: bool = False
    prefix: bool = True
    padded: bool = True

class BinaryOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    padded: bool = True

class ScientificOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    uppercase: bool = False


# Display modes. Decimal and octal carry no options.

class HexDisplay(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["hex"] = "hex"
    options: HexOptions = Field(default_factory=HexOptions)

class DecimalDisplay(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["decimal"] = "decimal"

class OctalDisplay(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["octal"] = "octal"

class BinaryDisplay(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["binary"] = "binary"
    options: BinaryOptions = Field(default_factory=BinaryOptions)

class ScientificDisplay(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["scientific"] = "scientific"
    options: ScientificOptions = Field(default_factory=ScientificOptions)


NumberDisplay = Annotated[
    Union[HexDisplay, DecimalDisplay, OctalDisplay, BinaryDisplay, ScientificDisplay],
    Field(discriminator="kind"),
]


def hex_display(*, uppercase: bool = False, prefix: bool = True, padded: bool = True) -> HexDisplay:
    return HexDisplay(options=HexOptions(uppercase=uppercase, prefix=prefix, padded=padded))

def binary_display(*, padded: bool = True) -> BinaryDisplay:
    return BinaryDisplay(options=BinaryOptions(padded=padded))

def scientific_display(*, uppercase: bool = False) -> ScientificDisplay:
    return ScientificDisplay(options=ScientificOptions(uppercase=uppercase))
