"""Constants and classification vocabularies for the postflop advisor."""

from enum import StrEnum


class Suit(StrEnum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"


class Rank(StrEnum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


RANK_VALUES: dict[Rank, int] = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
    Rank.ACE: 14,
}

SUIT_SYMBOLS: dict[str, Suit] = {
    "♥": Suit.HEARTS,
    "♦": Suit.DIAMONDS,
    "♣": Suit.CLUBS,
    "♠": Suit.SPADES,
}


class Street(StrEnum):
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"


class BoardTexture(StrEnum):
    """Board texture buckets, listed in classification precedence order."""

    MONOTONE = "monotone"
    PAIRED = "paired"
    CONNECTED = "connected"
    WET = "wet"
    ACE_HIGH = "ace_high"
    HIGH = "high"
    LOW = "low"
    DRY = "dry"


class DrawType(StrEnum):
    FLUSH_DRAW = "flush_draw"
    OESD = "oesd"
    GUTSHOT = "gutshot"
    COMBO_DRAW = "combo_draw"
    BACKDOOR_FLUSH = "backdoor_flush"
    BACKDOOR_STRAIGHT = "backdoor_straight"
    NO_DRAW = "no_draw"

    @property
    def is_straight_draw(self) -> bool:
        return self in (DrawType.OESD, DrawType.GUTSHOT)

    @property
    def outs(self) -> int:
        """Approximate clean outs to complete the draw on the next card."""
        return _DRAW_OUTS[self]


_DRAW_OUTS: dict[DrawType, int] = {
    DrawType.FLUSH_DRAW: 9,
    DrawType.OESD: 8,
    DrawType.GUTSHOT: 4,
    DrawType.COMBO_DRAW: 15,
    DrawType.BACKDOOR_FLUSH: 1,
    DrawType.BACKDOOR_STRAIGHT: 1,
    DrawType.NO_DRAW: 0,
}


class HandStrength(StrEnum):
    """Coarse hand strength, strongest first. DRAW sits outside the made-hand scale."""

    NUTS = "nuts"
    STRONG = "strong"
    MEDIUM = "medium"
    MARGINAL = "marginal"
    WEAK = "weak"
    DRAW = "draw"
    AIR = "air"


class SPRCategory(StrEnum):
    MICRO = "micro"  # < 2, commit territory
    SMALL = "small"  # 2-4, one street of betting
    MEDIUM = "medium"  # 4-8, two streets
    LARGE = "large"  # 8-13, standard
    DEEP = "deep"  # >= 13, multiple streets


class PlayerCount(StrEnum):
    HEADS_UP = "heads_up"
    THREE_WAY = "three_way"
    MULTI_WAY = "multi_way"


class ActionKind(StrEnum):
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    BET = "bet"
    RAISE = "raise"
    ALL_IN = "allin"


class Scenario(StrEnum):
    """Named postflop situations that select a strategy subtable."""

    CBET_IP = "cbet_ip"
    CBET_OOP = "cbet_oop"
    FACING_CBET = "facing_cbet"
    CHECK_RAISE = "check_raise"
    PROBE_BET = "probe_bet"
    DONK_BET = "donk_bet"
    TURN_BARREL = "turn_barrel"
    RIVER_VALUE = "river_value"
    FACING_TURN_BET = "facing_turn_bet"
    FACING_RIVER_BET = "facing_river_bet"
