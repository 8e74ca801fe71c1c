"""Tile kinds and the terminal rendering of a single tile."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

ESC = "\x1b["
RESET = "\x1b[0m"
BLANK = "\u3000"
TABLE_BACKGROUND = "\x1b[48;2;0;60;0m"

_CHARACTER_NUMERALS = "一二三四五六七八九"
_WIND_NAMES = "東南西北"
_SEASON_NAMES = "春夏秋冬"
_FLOWER_NAMES = "梅蘭菊竹"
_DRAGON_FACES = {0: ("白", "30;107"), 1: ("発", "32;107"), 2: ("中", "91;107")}


class Tileset(Enum):
    """The face family of a tile."""

    DOTS = auto()
    BAMBOOS = auto()
    CHARACTERS = auto()
    WINDS = auto()
    DRAGONS = auto()
    SEASONS = auto()
    FLOWERS = auto()


class Tiletype(Enum):
    """The broad category of a tile."""

    SUITED = auto()
    HONORS = auto()
    BONUS = auto()


def _pick(names: str, number: int) -> str:
    return names[number] if 0 <= number < len(names) else BLANK


@dataclass
class Pai:
    """A single tile together with its rendered escape sequence."""

    es: str = ""
    face: Tileset = Tileset.CHARACTERS
    settype: Tiletype = Tiletype.SUITED
    idx: int = 0
    number: int = 0
    value: int = 0
    doralv: int = 0
    dora: bool = False
    red: bool = False
    used: bool = True
    visible: bool = False

    def make_es(self) -> str:
        """Build the coloured escape sequence for this tile and store it in ``es``."""
        facechar = ""
        color = ""
        if self.face is Tileset.CHARACTERS:
            facechar = self.get_number()
            color = "91;107" if self.red else "30;107"
        elif self.face is Tileset.DOTS:
            facechar = self.get_number()
            color = "91;107" if self.red else "94;107"
        elif self.face is Tileset.BAMBOOS:
            facechar = self.get_number()
            color = "95;107" if self.red else "32;107"
        elif self.face is Tileset.WINDS:
            facechar = _pick(_WIND_NAMES, self.number)
            color = "30;107"
        elif self.face is Tileset.DRAGONS:
            facechar, color = _DRAGON_FACES.get(self.number, (BLANK, ""))
        elif self.face is Tileset.SEASONS:
            facechar = _pick(_SEASON_NAMES, self.number)
            color = "96;107"
        elif self.face is Tileset.FLOWERS:
            facechar = _pick(_FLOWER_NAMES, self.number)
            color = "95;107"

        dora = ";4" if self.doralv > 0 else ""
        if self.visible:
            facechar = BLANK
            color = TABLE_BACKGROUND
        self.es = f"{ESC}{color}{dora}m{facechar}{RESET}"
        return self.es

    def get_number(self) -> str:
        """Return the face character showing this tile's number."""
        if self.face is Tileset.CHARACTERS:
            return _pick(_CHARACTER_NUMERALS, self.number)
        if self.face in (Tileset.DOTS, Tileset.BAMBOOS):
            return chr(0xFF10 + self.number + 1)
        return BLANK