from __future__ import annotations
import math
from typing import Optional
from pydantic import BaseModel, field_validator

from listings.utils import parse_float_prefix

# ---------------------------
# Run options
# ---------------------------

class FilterOptions(BaseModel):
    input: Optional[str] = None
    output: Optional[str] = None
    display: bool = False
    furnished: bool = False
    price: Optional[float] = None

    @field_validator("input", "output", mode="before")
    def empty_path_is_none(cls, v):
        # only "" means not given; "  " is still a path
        if v is None or v == "":
            return None
        return str(v)

    @field_validator("price", mode="before")
    def lenient_price(cls, v):
        # "1500abc" -> 1500.0; unparsable -> filter disabled
        p = parse_float_prefix(v)
        if p is None or math.isnan(p):
            return None
        return p

    @property
    def wants_output(self) -> bool:
        return bool(self.output or self.display)
