"""The board of a pair-matching card game and its rules."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from memorymatch.hit import card_hit

CARD_MAX = 52
COLUMNS = 13
ROWS = 4
SUITS = 4

CELL_WIDTH = 90
CELL_HEIGHT = 140
BOARD_LEFT = 40
BOARD_TOP = 70
CARD_WIDTH = 80
CARD_HEIGHT = 100

MAX_COLLECT_LEVEL = 3


def card_origin(column: int, row: int) -> tuple[int, int]:
    """Top-left screen corner of the card at a grid cell."""
    return column * CELL_WIDTH + BOARD_LEFT, row * CELL_HEIGHT + BOARD_TOP


@dataclass
class Card:
    """One card on the board.

    ``face`` indexes the card image; ``suit`` and ``number`` derive from it.
    """

    face: int
    suit: int
    number: int
    column: int
    row: int
    selected: bool = False
    matched: bool = False


class Phase(enum.Enum):
    SELECT = "select"
    JUDGE = "judge"


class Sound(enum.Enum):
    """Sound effects; values are the sound file stems."""

    SELECT = "sellect"
    MISS = "miss"
    COLLECT_0 = "collect0"
    COLLECT_1 = "collect1"
    COLLECT_2 = "collect2"
    COLLECT_3 = "collect3"


_COLLECT_SOUNDS = (Sound.COLLECT_0, Sound.COLLECT_1, Sound.COLLECT_2, Sound.COLLECT_3)


class Cards:
    """Board state: dealing, selecting two cards and judging the pair.

    The miss counter and the streak level of the collect sound survive a new
    deal, so misses accumulate across games.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.cards: list[Card] = []
        self.selected: list[int] = []
        self.phase = Phase.SELECT
        self.miss_count = 0
        self.collect_count = 0
        self.miss_pending = False
        self.deal()

    def deal(self) -> None:
        """Shuffle a fresh deck onto the grid and start selecting."""
        faces = list(range(CARD_MAX))
        self._rng.shuffle(faces)
        self.cards = [
            Card(
                face=face,
                suit=face % SUITS,
                number=face // SUITS,
                column=position % COLUMNS,
                row=position // COLUMNS % ROWS,
            )
            for position, face in enumerate(faces)
        ]
        self.selected = []
        self.phase = Phase.SELECT

    def update(self, clicked: bool, mouse_x: int, mouse_y: int) -> list[Sound]:
        """Advance one frame and return the sounds to play."""
        if self.phase is Phase.SELECT:
            return self._update_select(clicked, mouse_x, mouse_y)
        return self._update_judge(clicked)

    def _update_select(self, clicked: bool, mouse_x: int, mouse_y: int) -> list[Sound]:
        sounds: list[Sound] = []
        if clicked:
            for index, card in enumerate(self.cards):
                box_x, box_y = card_origin(card.column, card.row)
                if not card_hit(box_x, box_y, mouse_x, mouse_y):
                    continue
                if not card.selected and not card.matched:
                    sounds.append(Sound.SELECT)
                    card.selected = True
                    self.selected.append(index)
        if len(self.selected) >= 2:
            self.phase = Phase.JUDGE
        return sounds

    def _clear_selection(self) -> None:
        for card in self.cards:
            card.selected = False
        self.selected = []
        self.phase = Phase.SELECT

    def _update_judge(self, clicked: bool) -> list[Sound]:
        first, second = (self.cards[i] for i in self.selected[:2])
        if first.number == second.number:
            first.matched = True
            second.matched = True
            self._clear_selection()
            sound = _COLLECT_SOUNDS[self.collect_count]
            self.collect_count = min(self.collect_count + 1, MAX_COLLECT_LEVEL)
            return [sound]

        sounds: list[Sound] = []
        if not self.miss_pending:
            sounds.append(Sound.MISS)
            self.miss_pending = True
        if clicked:
            self._clear_selection()
            self.collect_count = 0
            self.miss_count += 1
            self.miss_pending = False
        return sounds

    def all_matched(self) -> bool:
        """True once every card on the board has been matched."""
        return all(card.matched for card in self.cards)