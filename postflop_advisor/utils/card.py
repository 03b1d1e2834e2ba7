"""Card model and the rank/suit histograms shared by the classifiers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from functools import total_ordering

from postflop_advisor.utils.constants import RANK_VALUES, SUIT_SYMBOLS, Rank, Suit


@total_ordering
@dataclass(frozen=True)
class Card:
    """Represents a single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Create a Card from a string like 'Ah', 'Td', '10d' or 'A♥'.

        Args:
            s: Rank character(s) followed by a suit letter or symbol.

        Returns:
            A new Card instance.

        Raises:
            ValueError: If the string has the wrong length or contains
                       invalid rank/suit characters.
        """
        s = s.strip()
        if s[:2] == "10":
            s = "T" + s[2:]
        if len(s) != 2:
            raise ValueError(f"Card string must be 2 characters, got '{s}'")
        try:
            rank = Rank(s[0].upper())
        except ValueError:
            raise ValueError(f"Invalid rank character: '{s[0]}'")
        suit_char = s[1]
        if suit_char in SUIT_SYMBOLS:
            suit = SUIT_SYMBOLS[suit_char]
        else:
            try:
                suit = Suit(suit_char.lower())
            except ValueError:
                raise ValueError(f"Invalid suit character: '{suit_char}'")
        return cls(rank=rank, suit=suit)

    @property
    def value(self) -> int:
        """Numeric value of the card's rank (2-14)."""
        return RANK_VALUES[self.rank]

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))


def parse_cards(s: str) -> list[Card]:
    """Parse 'AhKs', 'Ah Ks' or 'Ah,Ks,Td' into a list of cards.

    Supports both separated and concatenated (2-char groups) formats.
    """
    s = s.strip().replace(",", " ")
    if not s:
        return []
    if " " in s:
        return [Card.from_str(c) for c in s.split()]
    if len(s) % 2 != 0:
        raise ValueError(f"Invalid card string: '{s}' (odd length)")
    return [Card.from_str(s[i:i + 2]) for i in range(0, len(s), 2)]


def rank_counts(cards: Iterable[Card]) -> Counter[int]:
    """Histogram of rank values (2-14)."""
    return Counter(c.value for c in cards)


def suit_counts(cards: Iterable[Card]) -> Counter[Suit]:
    return Counter(c.suit for c in cards)


def unique_values(cards: Iterable[Card]) -> list[int]:
    """Distinct rank values, ascending."""
    return sorted({c.value for c in cards})
