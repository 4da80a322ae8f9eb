# ================================
# File: agents.py
# ================================
from __future__ import annotations
import random
from typing import Optional

from cards import Card, Rank
from game import PlayerView


class RandomAgent:
    """Gioca una carta legale a caso."""

    def __init__(self, rng: Optional[random.Random] = None, name: str = "Random"):
        self.rng = rng or random.Random()
        self.name = name

    def choose(self, view: PlayerView) -> Card:
        if not view.legal:
            raise ValueError(f"Seat {view.seat}: nessuna carta giocabile")
        return self.rng.choice(view.legal)


class HeuristicAgent:
    def __init__(self, name: str = "Heuristic"):
        self.name = name

    def choose(self, view: PlayerView) -> Card:
        """Sceglie una carta legale con qualche regola da giocatore di circolo."""
        legal = list(view.legal)
        if not legal:
            raise ValueError(f"Seat {view.seat}: nessuna carta giocabile")

        # =====================
        # 1. Se rispondo al seme: prendo con la più forte se posso, altrimenti scarto la più debole
        # =====================
        if view.trick:
            lead = view.trick[0][1].suit
            best = max((c for _, c in view.trick if c.suit == lead), key=lambda c: c.strength)
            winning = [c for c in legal if c.suit == lead and c.strength > best.strength]
            if winning:
                return max(winning, key=lambda c: c.strength)
            return min(legal, key=lambda c: (c.points, c.strength))

        # =====================
        # 2. Se apro: palo più forte, tenendo l'asso se non ho anche 2 e 3
        # =====================
        strongest_suit = max(
            {c.suit for c in legal},
            key=lambda s: sum(c.strength for c in legal if c.suit == s),
        )
        in_suit = sorted((c for c in legal if c.suit == strongest_suit), key=lambda c: -c.strength)
        ranks = {c.rank for c in in_suit}
        for card in in_suit:
            if card.rank == Rank.ACE and not {Rank.TWO, Rank.THREE} <= ranks:
                continue
            return card

        # =====================
        # 3. Fallback semplice
        # =====================
        return legal[0]
