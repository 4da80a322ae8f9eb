# ================================
# File: shuffler.py
# ================================
from __future__ import annotations
import random
from typing import MutableSequence, Protocol, TypeVar

from errors import RandomSourceError
from log_utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Qualsiasi oggetto che sappia estrarre un indice in [0, stop).

    random.Random va già bene così com'è.
    """
    def randrange(self, stop: int) -> int: ...


def draw_index(rng: RandomSource, stop: int) -> int:
    try:
        j = rng.randrange(stop)
    except Exception as exc:
        raise RandomSourceError(f"Sorgente casuale fallita su randrange({stop})") from exc
    # bool è un int, ma non è un indice sensato
    if isinstance(j, bool) or not isinstance(j, int) or not 0 <= j < stop:
        raise RandomSourceError(f"Indice {j!r} fuori da [0, {stop})")
    return j


def fisher_yates(seq: MutableSequence[T], rng: RandomSource) -> MutableSequence[T]:
    """Permuta seq sul posto (Fisher-Yates) e la ritorna.

    Per N elementi usa N-1 estrazioni: ogni permutazione ha probabilità 1/N!.
    Si fanno solo scambi, quindi nessun elemento viene perso o duplicato
    anche se la sorgente fallisce a metà.
    """
    for i in range(len(seq) - 1, 0, -1):
        j = draw_index(rng, i + 1)
        seq[i], seq[j] = seq[j], seq[i]
    return seq


class Shuffler:
    """Mescolatore con sorgente casuale iniettata (mai quella globale)."""

    def __init__(self, rng: RandomSource):
        self.rng = rng

    @classmethod
    def seeded(cls, seed: int) -> "Shuffler":
        """Mescolatore riproducibile, utile nei test."""
        return cls(random.Random(seed))

    def shuffle(self, seq: MutableSequence[T]) -> MutableSequence[T]:
        logger.debug("Mescolo %d elementi", len(seq))
        return fisher_yates(seq, self.rng)
