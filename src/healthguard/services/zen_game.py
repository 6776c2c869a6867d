"""Zen memory-matching game."""

import random
from dataclasses import dataclass
from typing import Optional

ICONS = ("🌿", "🌸", "☀️", "🌊", "🦋", "🍎", "🧘", "💖")


@dataclass
class Card:
    id: int
    icon: str
    flipped: bool = False
    solved: bool = False


class ZenGame:
    """
    Flip two cards at a time looking for matching icons.

    A mismatched pair stays face-up until the next click (or an explicit
    ``resolve``) so the player gets to see both faces.
    """

    def __init__(self, icons: tuple[str, ...] = ICONS, rng: Optional[random.Random] = None):
        self.icons = icons
        self.rng = rng or random.Random()
        self.cards: list[Card] = []
        self.flipped: list[int] = []
        self.moves = 0
        self.new_game()

    def new_game(self) -> None:
        deck = list(self.icons) * 2
        self.rng.shuffle(deck)
        self.cards = [Card(id=index, icon=icon) for index, icon in enumerate(deck)]
        self.flipped = []
        self.moves = 0

    def card(self, card_id: int) -> Card:
        try:
            return self.cards[card_id]
        except IndexError:
            raise ValueError(f"No card with id {card_id}") from None

    @property
    def matched_pairs(self) -> int:
        return sum(1 for c in self.cards if c.solved) // 2

    @property
    def total_pairs(self) -> int:
        return len(self.icons)

    @property
    def is_complete(self) -> bool:
        return self.matched_pairs == self.total_pairs

    @property
    def has_pending_pair(self) -> bool:
        return len(self.flipped) == 2

    def resolve(self) -> Optional[bool]:
        """
        Settle a face-up pair.

        Returns:
            True for a match, False for a miss, None if no pair was pending
        """
        if not self.has_pending_pair:
            return None

        first, second = (self.card(i) for i in self.flipped)
        matched = first.icon == second.icon
        for c in (first, second):
            if matched:
                c.solved = True
            else:
                c.flipped = False
        self.flipped = []
        return matched

    def flip(self, card_id: int) -> bool:
        """
        Turn a card face-up.

        Returns:
            False if the click was ignored (card already showing or solved)
        """
        if self.has_pending_pair:
            self.resolve()

        clicked = self.card(card_id)
        if clicked.flipped or clicked.solved:
            return False

        clicked.flipped = True
        self.flipped.append(card_id)

        if len(self.flipped) == 2:
            self.moves += 1
            first = self.card(self.flipped[0])
            if first.icon == clicked.icon:
                # Matches settle straight away
                self.resolve()
        return True
