from __future__ import annotations
from dataclasses import dataclass

from jump61.types import Owner


@dataclass(frozen=True, slots=True)
class Square:
    owner: Owner
    spots: int

    def marker(self) -> str:
        if self.owner == "red":
            return "r"
        if self.owner == "blue":
            return "b"
        return "-"


INITIAL = Square(None, 1)
