from __future__ import annotations
from pydantic import BaseModel, Field, field_serializer

class FieldValue(BaseModel):
    bit_offset: int = Field(..., ge=0)
    width: int = Field(..., ge=1, le=32)
    value: int = Field(..., ge=0)

class ByteDump(BaseModel):
    offset: int = Field(..., ge=0)
    data: bytes = b""

    @field_serializer("data")
    def _hex(self, data: bytes) -> str:
        return data.hex(" ")

    def hexdump(self, width: int = 16) -> str:
        lines = []
        for i in range(0, len(self.data), width):
            row = self.data[i:i + width]
            text = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in row)
            lines.append(f"{self.offset + i:08x}  {row.hex(' '):<{width * 3}} {text}")
        return "\n".join(lines)
