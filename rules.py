# ================================
# File: rules.py
# ================================
from __future__ import annotations
from fractions import Fraction
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from cards import Card, Suit

# ================================
# Config
# ================================
PLAYERS = 4  # partita classica: 2 coppie
TRICKS = 10  # prese per smazzata a 4 giocatori
SCORE_TO_WIN = 31  # punti per vincere la partita lunga
LAST_TRICK_BONUS = 1  # punto a chi fa l'ultima presa
SUPPORTED_PLAYER_COUNTS = (2, 4)  # a 2: variante semplificata, 20 carte a testa e niente tallone


def team_of(seat: int) -> int:
    """Squadra di un seat: team 0 = seats 0 e 2 ; team 1 = seats 1 e 3.

    A due giocatori ogni giocatore è la sua "squadra" (0 o 1).
    """
    return seat % 2


def determine_taker(plays: Sequence[Tuple[int, Card]]) -> int:
    """Ritorna il seat che prende.

    Vince la carta più forte del seme di uscita (la prima giocata); nel
    Tresette non c'è briscola, quindi le carte di altri semi non prendono mai.
    """
    if not plays:
        raise ValueError("Presa vuota: nessun vincitore")
    lead = plays[0][1].suit
    best_seat, best_card = plays[0]
    for seat, card in plays[1:]:
        if card.suit == lead and card.strength > best_card.strength:
            best_seat, best_card = seat, card
    return best_seat


def playable(hand: Iterable[Card], lead_suit: Optional[Suit]) -> List[Card]:
    """Ritorna le carte giocabili dalla mano.
    - Se non c'è ancora una carta nella presa: qualsiasi carta è valida.
    - Altrimenti, se ho almeno una carta del seme di uscita: devo seguirlo.
    - Se non ne ho: posso giocare qualsiasi carta.
    """
    hand = list(hand)
    if lead_suit is None:
        return hand
    same_suit = [c for c in hand if c.suit == lead_suit]
    return same_suit if same_suit else hand


def trick_points(cards: Iterable[Card]) -> Fraction:
    """Somma esatta dei valori delle carte (A=1, 2/3/R/C/F=1/3, altre=0)."""
    return sum((c.points for c in cards), Fraction(0))


def hand_points(points_by_team: Mapping[int, Fraction], last_taker_team: int) -> Dict[int, int]:
    """Punti interi di una smazzata per ogni squadra.

    Regole:
    - si arrotonda per difetto ai punti interi
    - +1 punto bonus a chi prende l'ultima presa
    Su una smazzata completa il totale fa sempre 11.
    """
    pts = {team: int(p // 1) for team, p in points_by_team.items()}
    pts[last_taker_team] = pts.get(last_taker_team, 0) + LAST_TRICK_BONUS
    return pts


def is_completed(score: Mapping[int, int], score_to_win: int = SCORE_TO_WIN) -> bool:
    """Una partita finisce quando una squadra ha almeno 31 punti ed è davanti a tutte le altre."""
    return determine_winner(score) is not None and max(score.values()) >= score_to_win


def determine_winner(scores: Mapping[int, object]) -> Optional[int]:
    """Squadra col punteggio più alto, None in caso di pareggio."""
    if not scores:
        return None
    best = max(scores.values())
    leaders = [team for team, s in scores.items() if s == best]
    return leaders[0] if len(leaders) == 1 else None
