# ================================
# File: game.py
# ================================
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from fractions import Fraction
from typing import Dict, FrozenSet, List, Optional, Tuple, Union

from cards import Card, Suit
from deck import Deck
from errors import InvalidGameState, InvalidPlayerCount, InvalidSeat
from hands import Play, ResolvedTrick, TrickTracker
from log_utils import get_logger
from rules import (
    SCORE_TO_WIN,
    SUPPORTED_PLAYER_COUNTS,
    determine_winner,
    hand_points,
    is_completed,
    team_of,
)
from shuffler import RandomSource

logger = get_logger(__name__)


class GamePhase(Enum):
    AWAITING_DEAL = auto()
    IN_PROGRESS = auto()
    TRICK_COMPLETE = auto()  # transitorio, dura solo dentro play()
    GAME_COMPLETE = auto()


# Transizioni ammesse della macchina a stati
TRANSITIONS = {
    GamePhase.AWAITING_DEAL: {GamePhase.IN_PROGRESS},
    GamePhase.IN_PROGRESS: {GamePhase.TRICK_COMPLETE},
    GamePhase.TRICK_COMPLETE: {GamePhase.IN_PROGRESS, GamePhase.GAME_COMPLETE},
    GamePhase.GAME_COMPLETE: set(),
}


# ================================
# Esiti di una giocata
# ================================
@dataclass(frozen=True)
class Ongoing:
    """La presa è ancora aperta: tocca a next_player."""
    next_player: int


@dataclass(frozen=True)
class TrickResolved:
    winner: int
    points_awarded: Fraction
    trick: ResolvedTrick


@dataclass(frozen=True)
class GameOver:
    """Fine smazzata.

    - final_scores: punti esatti per squadra dalle prese (somma = 32/3)
    - points: punti interi per squadra (per difetto, +1 all'ultima presa)
    - winner: squadra con final_scores più alto, None se pari. Conta solo
      il valore delle carte prese: non è per forza chi ha più punti interi,
      perché il bonus dell'ultima presa resta fuori
    """
    final_scores: Dict[int, Fraction]
    points: Dict[int, int]
    winner: Optional[int]
    last_trick: ResolvedTrick


TrickOutcome = Union[Ongoing, TrickResolved, GameOver]


@dataclass(frozen=True)
class PlayerView:
    """Quello che un giocatore può vedere del tavolo (niente mani altrui)."""
    seat: int
    players: int
    hand: Tuple[Card, ...]
    legal: Tuple[Card, ...]
    trick: Tuple[Play, ...]
    played: Tuple[Card, ...]
    voids: Tuple[FrozenSet[Suit], ...]  # per seat
    scores: Dict[int, Fraction]
    to_play: bool


class Game:
    """Una smazzata di Tresette.

    Stati: AWAITING_DEAL -> IN_PROGRESS -> TRICK_COMPLETE -> IN_PROGRESS | GAME_COMPLETE.
    A 4 giocatori si gioca a coppie (0+2 contro 1+3), a 2 ognuno per sé.
    La versione a 2 è semplificata: si distribuiscono 20 carte a testa e non
    c'è il tallone da cui pescare come nel Tresette in due tradizionale.
    """

    def __init__(self, player_count: int, rng: RandomSource, leader: int = 0):
        if player_count not in SUPPORTED_PLAYER_COUNTS:
            raise InvalidPlayerCount(
                f"Il Tresette si gioca in {' o '.join(map(str, SUPPORTED_PLAYER_COUNTS))}, non in {player_count}"
            )
        if not 0 <= leader < player_count:
            raise InvalidSeat(f"Leader {leader} fuori range")
        self.player_count = player_count
        self.rng = rng
        self.leader = leader
        self.phase = GamePhase.AWAITING_DEAL
        self.tracker: Optional[TrickTracker] = None
        self._scores: Dict[int, Fraction] = {
            t: Fraction(0) for t in sorted({team_of(s) for s in range(player_count)})
        }
        self.result: Optional[GameOver] = None

    @classmethod
    def new(cls, player_count: int, rng: RandomSource, leader: int = 0) -> "Game":
        """Crea la partita, mescola e distribuisce."""
        game = cls(player_count, rng, leader)
        game.deal()
        return game

    @classmethod
    def from_hands(cls, hands: List[List[Card]], leader: int = 0) -> "Game":
        """Riprende una smazzata con mani già note (niente mescolata)."""
        game = cls(len(hands), rng=None, leader=leader)
        game._start(hands)
        return game

    # ================================
    # Transizioni
    # ================================
    def _transition(self, new_phase: GamePhase) -> None:
        if new_phase not in TRANSITIONS[self.phase]:
            raise RuntimeError(f"Transizione illegale {self.phase.name} -> {new_phase.name}")
        self.phase = new_phase

    def _require(self, phase: GamePhase, action: str) -> None:
        if self.phase is not phase:
            raise InvalidGameState(f"Impossibile {action} in stato {self.phase.name}")

    def deal(self) -> None:
        """Mescola un mazzo nuovo con la sorgente iniettata e distribuisce a giro."""
        self._require(GamePhase.AWAITING_DEAL, "distribuire")
        deck = Deck.new()
        deck.shuffle(self.rng)
        self._start(deck.deal(self.player_count))

    def _start(self, hands: List[List[Card]]) -> None:
        self._require(GamePhase.AWAITING_DEAL, "distribuire")
        tracker = TrickTracker(hands, self.leader)
        total = sum(len(h) for h in tracker.hands)
        if total == 0:
            raise ValueError("Mani vuote: non c'è niente da giocare")
        if any(len(h) != total // self.player_count for h in tracker.hands):
            raise InvalidPlayerCount("Le mani devono avere tutte la stessa lunghezza")
        if len(set(tracker.cards_in_play())) != total:
            raise ValueError("Carte duplicate tra le mani")
        self.tracker = tracker
        self._transition(GamePhase.IN_PROGRESS)
        logger.debug("Smazzata iniziata: %d giocatori, apre il seat %d", self.player_count, self.leader)

    # ================================
    # Giocata
    # ================================
    def play(self, player: int, card: Card) -> TrickOutcome:
        """Giocata del seat player. Se rifiutata, lo stato non cambia."""
        self._require(GamePhase.IN_PROGRESS, "giocare")
        self.tracker.play(player, card)
        if not self.tracker.trick.is_complete():
            return Ongoing(self.tracker.current_player())

        self._transition(GamePhase.TRICK_COMPLETE)
        done = self.tracker.resolve()
        team = team_of(done.taker)
        self._scores[team] += done.points
        logger.debug("Presa %d: %s", len(self.tracker.resolved), done)

        if not self.tracker.is_exhausted():
            self._transition(GamePhase.IN_PROGRESS)
            return TrickResolved(done.taker, done.points, done)

        self._transition(GamePhase.GAME_COMPLETE)
        final = dict(self._scores)
        self.result = GameOver(
            final_scores=final,
            points=hand_points(final, team),
            winner=determine_winner(final),
            last_trick=done,
        )
        logger.debug("Smazzata finita: %s punti %s", final, self.result.points)
        return self.result

    # ================================
    # Consultazione
    # ================================
    @property
    def current_player(self) -> Optional[int]:
        if self.phase is not GamePhase.IN_PROGRESS:
            return None
        return self.tracker.current_player()

    def hand(self, player: int) -> Tuple[Card, ...]:
        """Carte in mano al solo giocatore richiesto."""
        return self._dealt().hand(player)

    def legal_cards(self, player: int) -> List[Card]:
        if self.current_player != player:
            return []
        return self.tracker.legal_cards(player)

    def current_trick(self) -> Tuple[Play, ...]:
        return self._dealt().current_trick()

    def completed_tricks(self) -> Tuple[ResolvedTrick, ...]:
        return tuple(self._dealt().resolved)

    def scores(self) -> Dict[int, Fraction]:
        return dict(self._scores)

    def view(self, player: int) -> PlayerView:
        tracker = self._dealt()
        return PlayerView(
            seat=player,
            players=self.player_count,
            hand=tracker.hand(player),
            legal=tuple(self.legal_cards(player)),
            trick=tracker.current_trick(),
            played=tuple(tracker.played_cards()),
            voids=tuple(frozenset(tracker.void_suits(s)) for s in range(self.player_count)),
            scores=self.scores(),
            to_play=self.current_player == player,
        )

    def _dealt(self) -> TrickTracker:
        if self.tracker is None:
            raise InvalidGameState("Le carte non sono ancora state distribuite")
        return self.tracker


class Match:
    """Partita lunga: si giocano smazzate finché una squadra arriva a 31 ed è in testa.

    Chi apre ruota di un posto a ogni smazzata.
    """

    def __init__(self, player_count: int, rng: RandomSource, score_to_win: int = SCORE_TO_WIN):
        if player_count not in SUPPORTED_PLAYER_COUNTS:
            raise InvalidPlayerCount(f"Il Tresette si gioca in 2 o 4, non in {player_count}")
        self.player_count = player_count
        self.rng = rng
        self.score_to_win = score_to_win
        self.score: Dict[int, int] = {t: 0 for t in sorted({team_of(s) for s in range(player_count)})}
        self.games: List[Game] = []
        self.history: List[Dict[int, int]] = []  # punti di ogni smazzata registrata

    def is_completed(self) -> bool:
        return is_completed(self.score, self.score_to_win)

    @property
    def winner(self) -> Optional[int]:
        return determine_winner(self.score) if self.is_completed() else None

    def new_game(self) -> Game:
        if self.is_completed():
            raise InvalidGameState("La partita è già finita")
        if len(self.history) != len(self.games):
            raise InvalidGameState("La smazzata in corso non è stata registrata")
        leader = len(self.games) % self.player_count
        game = Game.new(self.player_count, self.rng, leader)
        self.games.append(game)
        return game

    def record(self, game: Game) -> Dict[int, int]:
        """Somma al punteggio i punti di una smazzata finita."""
        if game.result is None:
            raise InvalidGameState("La smazzata non è finita")
        if not self.games or game is not self.games[-1]:
            raise ValueError("La smazzata non appartiene a questa partita")
        if len(self.history) == len(self.games):
            raise InvalidGameState("Smazzata già registrata")
        self.history.append(dict(game.result.points))
        for team, pts in game.result.points.items():
            self.score[team] += pts
        logger.debug("Punteggio partita: %s", self.score)
        return dict(self.score)
