# ================================
# File: deck.py
# ================================
from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Union

from cards import Card, full_deck
from errors import InvalidPlayerCount
from log_utils import get_logger
from shuffler import RandomSource, Shuffler, draw_index

logger = get_logger(__name__)


class Deck:
    """Mazzo di carte ordinato. Appena creato è in ordine canonico (40 carte)."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: List[Card] = full_deck() if cards is None else list(cards)

    @classmethod
    def new(cls) -> "Deck":
        return cls()

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Deck":
        """Ricostruisce un mazzo in un ordine noto (es. ripresa di una smazzata)."""
        return cls(cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def shuffle(self, rng: Union[RandomSource, Shuffler]) -> None:
        """Mescola il mazzo con la sorgente casuale data."""
        shuffler = rng if isinstance(rng, Shuffler) else Shuffler(rng)
        shuffler.shuffle(self._cards)

    def draw(self) -> Optional[Card]:
        """Pesca la carta in cima (l'ultima della sequenza), None se vuoto."""
        return self._cards.pop() if self._cards else None

    def push(self, card: Card) -> None:
        """Mette una carta in cima al mazzo (sarà la prossima pescata)."""
        self._cards.append(card)

    def shuffle_card(self, card: Card, rng: RandomSource) -> int:
        """Infila una carta in un punto a caso del mazzo, mai in fondo né in cima.

        Ritorna la posizione scelta. Con meno di due carte la mette in cima.
        """
        if len(self._cards) < 2:
            self.push(card)
            return len(self._cards) - 1
        position = 1 + draw_index(rng, len(self._cards) - 1)
        self._cards.insert(position, card)
        return position

    def deal(self, num_players: int) -> List[List[Card]]:
        """Distribuisce tutto il mazzo a giro (carta i al giocatore i % n).

        Il mazzo resta vuoto. Solleva InvalidPlayerCount se le carte non si
        dividono in parti uguali.
        """
        if num_players < 1 or len(self._cards) % num_players != 0:
            raise InvalidPlayerCount(
                f"Impossibile dividere {len(self._cards)} carte tra {num_players} giocatori"
            )
        hands: List[List[Card]] = [[] for _ in range(num_players)]
        for i, card in enumerate(self._cards):
            hands[i % num_players].append(card)
        self._cards = []
        logger.debug("Distribuite %d carte a testa a %d giocatori", len(hands[0]), num_players)
        return hands
