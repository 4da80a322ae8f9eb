# ================================
# File: errors.py
# ================================
"""Errori sollevati dal motore verso chi lo pilota (front-end, agenti, test).

Tutti derivano da GameError. Una giocata rifiutata non modifica mai lo stato
(mani, presa in corso, punteggi).
"""


class GameError(Exception):
    """Base di tutti gli errori del motore."""


class InvalidPlayerCount(GameError):
    """Numero di giocatori incompatibile con il mazzo o con le regole."""


class NotPlayerTurn(GameError):
    """Giocata fuori turno."""


class CardNotInHand(GameError):
    """La carta indicata non è nella mano del giocatore."""


class IllegalPlay(GameError):
    """Giocata contraria alle regole (es. obbligo di rispondere al seme)."""


class InvalidGameState(GameError):
    """Operazione non permessa nello stato attuale della partita."""


class RandomSourceError(GameError):
    """La sorgente casuale ha fallito o ha restituito un indice non valido."""


class InvalidSeat(GameError, ValueError):
    """Seat inesistente al tavolo (consultazione o leader fuori range)."""
