"""Game settings and construction of the full tile set."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from mahjang.pai import Pai, Tileset, Tiletype

_SUITS = (Tileset.CHARACTERS, Tileset.DOTS, Tileset.BAMBOOS)


@dataclass
class Board:
    """Rule options and the current tiles of a game."""

    pais: list[Pai] = field(default_factory=list)
    moves: int = 0
    akadra: bool = False
    seasons: bool = False
    flowers: bool = False
    back: bool = False
    sanma: bool = False

    def create_board(self) -> list[Pai]:
        """Build every tile the current options call for, in a fixed order."""
        pais: list[Pai] = []
        idx = 0

        for face in _SUITS:
            for number in range(9):
                for copy in range(4):
                    if self.sanma and face is Tileset.CHARACTERS and 0 < number < 8:
                        continue
                    red = self.akadra and number == 4 and copy == 0
                    tile = Pai(
                        face=face,
                        settype=Tiletype.SUITED,
                        idx=idx,
                        number=number,
                        value=number + 1,
                        doralv=1 if red else 0,
                        red=red,
                    )
                    tile.make_es()
                    pais.append(tile)
                    idx += 1

        for face, kinds in ((Tileset.WINDS, 4), (Tileset.DRAGONS, 3)):
            for number in range(kinds):
                tile = Pai()
                for _ in range(3):
                    tile = Pai(face=face, settype=Tiletype.HONORS, idx=idx, number=number)
                    tile.make_es()
                    pais.append(tile)
                    idx += 1
                # The fourth copy repeats the third, serial number included.
                pais.append(replace(tile))
                idx += 1

        bonus = []
        if self.seasons:
            bonus.append(Tileset.SEASONS)
        if self.flowers:
            bonus.append(Tileset.FLOWERS)
        for face in bonus:
            for number in range(4):
                tile = Pai(face=face, settype=Tiletype.BONUS, idx=idx, number=number, value=-1)
                tile.make_es()
                pais.append(tile)
                idx += 1

        return pais