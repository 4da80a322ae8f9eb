# ================================
# File: hands.py
# ================================
from __future__ import annotations
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, List, Optional, Set, Tuple

from cards import Card, Suit
from errors import CardNotInHand, IllegalPlay, InvalidSeat, NotPlayerTurn
from rules import determine_taker, playable, trick_points

Play = Tuple[int, Card]


class Hand:
    """Carte in mano a un giocatore, nell'ordine in cui sono arrivate."""

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: List[Card] = list(cards)

    def give(self, card: Card) -> None:
        self._cards.append(card)

    def remove(self, card: Card) -> None:
        try:
            self._cards.remove(card)
        except ValueError:
            raise CardNotInHand(f"{card} non è in mano") from None

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def of_suit(self, suit: Suit) -> List[Card]:
        return [c for c in self._cards if c.suit == suit]

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Hand({' '.join(str(c) for c in self._cards)})"


@dataclass
class Trick:
    """Rappresenta una presa (trick) in corso.
    TRICK = 1 GIRO DI GIOCATE -> NON 1 PARTITA

    Attributi:
      - leader: seat che ha aperto la presa
      - players: numero di giocatori al tavolo (= carte per presa)
      - plays: lista di tuple (seat, card) in ordine di gioco
    """
    leader: int
    players: int
    plays: List[Play] = field(default_factory=list)

    def lead_suit(self) -> Optional[Suit]:
        """Seme d'uscita della presa (quello della prima carta giocata)."""
        if not self.plays:
            return None
        return self.plays[0][1].suit

    def is_complete(self) -> bool:
        return len(self.plays) == self.players

    def next_to_play(self) -> int:
        return (self.leader + len(self.plays)) % self.players

    def cards(self) -> List[Card]:
        return [c for _, c in self.plays]

    def winner(self) -> int:
        """Seat del giocatore che ha vinto la presa (solo a presa completa)."""
        if not self.is_complete():
            raise RuntimeError("Trick incompleto")
        return determine_taker(self.plays)


@dataclass(frozen=True)
class ResolvedTrick:
    """Presa chiusa: giocate, chi ha preso e quanto valeva."""
    plays: Tuple[Play, ...]
    taker: int
    points: Fraction

    @property
    def taken_with(self) -> Card:
        return next(c for s, c in self.plays if s == self.taker)

    def __str__(self) -> str:
        played = " ".join(f"{s}:{c}" for s, c in self.plays)
        return f"{played} -> {self.taker} ({self.points})"


class TrickTracker:
    """Mani dei giocatori, presa in corso e prese già chiuse.

    Invariante: carte in mano + presa in corso + prese chiuse = mazzo iniziale.
    """

    def __init__(self, hands: Iterable[Iterable[Card]], leader: int = 0):
        self.hands: List[Hand] = [Hand(h) for h in hands]
        self.players = len(self.hands)
        if not 0 <= leader < self.players:
            raise InvalidSeat(f"Leader {leader} fuori range")
        self.trick = Trick(leader, self.players)
        self.resolved: List[ResolvedTrick] = []

    # --- consultazione (senza effetti collaterali) ---

    def hand(self, player: int) -> tuple[Card, ...]:
        return self._hand_of(player).cards

    def current_trick(self) -> tuple[Play, ...]:
        return tuple(self.trick.plays)

    def current_player(self) -> int:
        return self.trick.next_to_play()

    def legal_cards(self, player: int) -> List[Card]:
        return playable(self._hand_of(player).cards, self.trick.lead_suit())

    def played_cards(self) -> List[Card]:
        """Carte già uscite: prese chiuse più presa in corso."""
        out = [c for t in self.resolved for _, c in t.plays]
        out.extend(self.trick.cards())
        return out

    def cards_in_play(self) -> List[Card]:
        """Tutte le carte ancora tracciate (mani + uscite): serve per i controlli di conservazione."""
        out = [c for h in self.hands for c in h.cards]
        out.extend(self.played_cards())
        return out

    def void_suits(self, player: int) -> Set[Suit]:
        """Semi che il giocatore ha mostrato di non avere (non ha risposto al seme)."""
        voids: Set[Suit] = set()
        tricks = [t.plays for t in self.resolved] + [tuple(self.trick.plays)]
        for plays in tricks:
            if len(plays) < 2:
                continue
            lead = plays[0][1].suit
            for seat, card in plays[1:]:
                if seat == player and card.suit != lead:
                    voids.add(lead)
        return voids

    def is_exhausted(self) -> bool:
        return all(len(h) == 0 for h in self.hands) and not self.trick.plays

    # --- mutazioni ---

    def play(self, player: int, card: Card) -> None:
        """Sposta la carta dalla mano del giocatore alla presa in corso.

        Tutti i controlli vengono fatti prima di toccare lo stato.
        """
        if self.trick.is_complete():
            raise RuntimeError("La presa è completa: va risolta prima di giocare")
        if player != self.trick.next_to_play():
            raise NotPlayerTurn(f"Tocca al seat {self.trick.next_to_play()}, non al seat {player}")
        hand = self.hands[player]
        if card not in hand:
            raise CardNotInHand(f"{card} non è in mano al seat {player}")
        if card not in playable(hand.cards, self.trick.lead_suit()):
            raise IllegalPlay(f"{card}: devi rispondere a {self.trick.lead_suit().name}")
        hand.remove(card)
        self.trick.plays.append((player, card))

    def resolve(self) -> ResolvedTrick:
        """Chiude la presa completa e ne apre una nuova guidata da chi ha preso."""
        taker = self.trick.winner()
        done = ResolvedTrick(
            plays=tuple(self.trick.plays),
            taker=taker,
            points=trick_points(self.trick.cards()),
        )
        self.resolved.append(done)
        self.trick = Trick(taker, self.players)
        return done

    def _hand_of(self, player: int) -> Hand:
        if not 0 <= player < self.players:
            raise InvalidSeat(f"Seat {player} non è al tavolo")
        return self.hands[player]
