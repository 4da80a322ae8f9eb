# ================================
# File: cards.py
# ================================
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import List


class Suit(Enum):
    """Semi italiani. L'ordine serve solo per la stampa e per l'ordine canonico."""
    DENARI = 0
    COPPE = 1
    SPADE = 2
    BASTONI = 3

    @property
    def symbol(self) -> str:
        # Sigle compatte per la stampa: D/C/S/B
        return self.name[0]


class Rank(Enum):
    """Rank del mazzo da 40 carte, nell'ordine canonico (Asso..Re)."""
    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    JACK = 7    # Fante
    KNIGHT = 8  # Cavallo
    KING = 9    # Re

    @property
    def strength(self) -> int:
        """Forza di presa secondo il Tresette (9=massima, 0=minima)."""
        return RANK_TO_STRENGTH[self]

    @property
    def points(self) -> Fraction:
        """Valore in punti, esatto (terzi di punto)."""
        return VALUE_BY_RANK[self]

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self]


# Ordine di forza del Tresette (dal più forte al più debole):
# 3 > 2 > A > R > C > F > 7 > 6 > 5 > 4
STRENGTH_DESC = [
    Rank.THREE, Rank.TWO, Rank.ACE, Rank.KING, Rank.KNIGHT,
    Rank.JACK, Rank.SEVEN, Rank.SIX, Rank.FIVE, Rank.FOUR,
]
RANK_TO_STRENGTH = {r: 9 - i for i, r in enumerate(STRENGTH_DESC)}

# Asso = 1 punto, 2/3/Re/Cavallo/Fante = 1/3, le altre = 0
VALUE_BY_RANK = {
    Rank.ACE: Fraction(1),
    Rank.TWO: Fraction(1, 3),
    Rank.THREE: Fraction(1, 3),
    Rank.FOUR: Fraction(0),
    Rank.FIVE: Fraction(0),
    Rank.SIX: Fraction(0),
    Rank.SEVEN: Fraction(0),
    Rank.JACK: Fraction(1, 3),
    Rank.KNIGHT: Fraction(1, 3),
    Rank.KING: Fraction(1, 3),
}

RANK_SYMBOLS = {
    Rank.ACE: "A", Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7",
    Rank.JACK: "F", Rank.KNIGHT: "C", Rank.KING: "R",
}
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {s.symbol: s for s in Suit}

DECK_SIZE = len(Suit) * len(Rank)


@dataclass(frozen=True)
class Card:
    """Rappresenta una carta del mazzo italiano (40 carte).

    Due Card con stesso seme e rank sono intercambiabili (uguaglianza per valore).
    """
    suit: Suit
    rank: Rank

    @property
    def strength(self) -> int:
        return self.rank.strength

    @property
    def points(self) -> Fraction:
        return self.rank.points

    @property
    def canonical_key(self) -> tuple[int, int]:
        """Chiave per l'ordine canonico del mazzo (seme, poi rank)."""
        return (self.suit.value, self.rank.value)

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"


def id_to_card(cid: int) -> Card:
    """Converte un id (0..39) nella corrispondente Card."""
    if not 0 <= cid < DECK_SIZE:
        raise ValueError(f"Id carta fuori range: {cid}")
    return Card(Suit(cid // 10), Rank(cid % 10))


def card_to_id(card: Card) -> int:
    """Converte una Card nel suo id (0..39)."""
    return card.suit.value * 10 + card.rank.value


def full_deck() -> List[Card]:
    """Ritorna il mazzo completo in ordine canonico."""
    return [Card(s, r) for s in Suit for r in Rank]


def parse_card(text: str) -> Card:
    """Legge una carta in notazione compatta, es. "AD" (Asso di Denari) o "RC"."""
    text = text.strip().upper()
    if len(text) != 2 or text[0] not in SYMBOL_TO_RANK or text[1] not in SYMBOL_TO_SUIT:
        raise ValueError(f"Carta non valida: {text!r}")
    return Card(SYMBOL_TO_SUIT[text[1]], SYMBOL_TO_RANK[text[0]])


# Somma dei valori di tutte le carte: 4 * (1 + 5/3) = 32/3
DECK_TOTAL_VALUE = sum((c.points for c in full_deck()), Fraction(0))
