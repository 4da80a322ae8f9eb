# ================================
# File: obs/encoder.py
# ================================
import torch

from cards import DECK_SIZE, Suit, card_to_id
from game import PlayerView


def feature_dim(players: int = 4) -> int:
    """Dimensione del vettore di feature: mano + uscite + void flags + seat + compagno."""
    return 2 * DECK_SIZE + players * len(Suit) + 2 * players


def legal_mask(view: PlayerView) -> torch.Tensor:
    """Maschera binaria (40 elementi) delle carte giocabili."""
    mask = torch.zeros(DECK_SIZE)
    for c in view.legal:
        mask[card_to_id(c)] = 1.0
    return mask


def encode_view(view: PlayerView):
    """Trasforma la vista di un giocatore in un vettore di feature PyTorch + mask delle azioni legali."""
    # One-hot della mano (40)
    hand_vec = torch.zeros(DECK_SIZE)
    for c in view.hand:
        hand_vec[card_to_id(c)] = 1.0

    # Carte già uscite (40): prese chiuse + presa in corso
    played_vec = torch.zeros(DECK_SIZE)
    for c in view.played:
        played_vec[card_to_id(c)] = 1.0

    # Void flags (players x 4): il seat non ha risposto a quel seme
    voids = torch.zeros(view.players, len(Suit))
    for seat, suits in enumerate(view.voids):
        for s in suits:
            voids[seat, s.value] = 1.0

    # Seat e compagno (a 2 giocatori il "compagno" è se stesso)
    seat_id = torch.zeros(view.players)
    seat_id[view.seat] = 1.0
    ally_pos = torch.zeros(view.players)
    ally_pos[(view.seat + 2) % view.players] = 1.0

    # Concatenazione feature
    features = torch.cat([hand_vec, played_vec, voids.flatten(), seat_id, ally_pos])
    features = features.unsqueeze(0)  # shape [1, dim]

    mask = legal_mask(view).unsqueeze(0)
    return features, mask
