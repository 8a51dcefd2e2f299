from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional

from ..binary.keystream import DEFAULT_KEY, KeyFn, constant_key, rotating_key, table_key

class KeySchedule(str, Enum):
    CONSTANT = "constant"
    ROTATING = "rotating"
    TABLE = "table"

class ObfuscationConfig(BaseModel):
    key: int = Field(DEFAULT_KEY, ge=0, le=0xFF)
    schedule: KeySchedule = KeySchedule.ROTATING
    table: Optional[List[int]] = None

    @model_validator(mode="after")
    def _table_matches_schedule(self) -> "ObfuscationConfig":
        if self.schedule is KeySchedule.TABLE:
            if self.table is None or len(self.table) != 256:
                raise ValueError("table schedule needs a 256-entry table")
            if any(not (0 <= v <= 0xFF) for v in self.table):
                raise ValueError("table entries must be bytes")
        return self

    def key_fn(self) -> KeyFn:
        if self.schedule is KeySchedule.CONSTANT:
            return constant_key(self.key)
        if self.schedule is KeySchedule.TABLE:
            return table_key(self.table, self.key)
        return rotating_key(self.key)

class StreamConfig(BaseModel):
    obfuscation: ObfuscationConfig | None = None
