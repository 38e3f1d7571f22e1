from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, List, Union

from pydantic import BaseModel, ConfigDict, Field

from .definition import NumericDefinition
from .display import DecimalDisplay, NumberDisplay

if TYPE_CHECKING:
    from ..binary.cursor import BytesLike, ReadCursor
    from .value import SizedValue


class SizedFormat(BaseModel):
    """
    A number shape paired with a display mode.

    Configure once, then replay at as many offsets as needed::

        fmt = SizedFormat(definition=NumericDefinition.u16(Endian.LITTLE), display=hex_display())
        fmt.stamp(data, range(0, 16, 2))
    """
    model_config = ConfigDict(frozen=True)

    definition: NumericDefinition
    display: NumberDisplay = Field(default_factory=DecimalDisplay)

    def size(self) -> int:
        return self.definition.size()

    def read(self, cursor: "ReadCursor") -> "SizedValue":
        return self.definition.read(cursor)

    def to_string(self, cursor: "ReadCursor") -> str:
        return self.read(cursor).to_string(self.display)

    def stamp(self, data: "Union[BytesLike, ReadCursor]", offsets: Iterable[int]) -> List[str]:
        from ..binary.cursor import ReadCursor
        base = data if isinstance(data, ReadCursor) else ReadCursor(data)
        return [self.to_string(base.at(off)) for off in offsets]
