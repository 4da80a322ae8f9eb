import logging
from fractions import Fraction

import pytest

from cards import Suit, parse_card
from errors import CardNotInHand, IllegalPlay, NotPlayerTurn
from hands import Hand, Trick, TrickTracker


def cards(*texts):
    return [parse_card(t) for t in texts]


def tracker():
    return TrickTracker([cards("4D", "AC"), cards("AD", "3C"), cards("2S", "2C")], leader=2)


def test_hand_basic_ops():
    h = Hand(cards("AD", "2C"))
    h.give(parse_card("3S"))
    assert len(h) == 3 and parse_card("3S") in h
    assert h.of_suit(Suit.COPPE) == cards("2C")
    h.remove(parse_card("AD"))
    assert h.cards == tuple(cards("2C", "3S"))
    with pytest.raises(CardNotInHand):
        h.remove(parse_card("AD"))


def test_trick_rotation_from_leader():
    t = Trick(leader=2, players=3)
    assert t.next_to_play() == 2 and t.lead_suit() is None
    t.plays.append((2, parse_card("2S")))
    assert t.next_to_play() == 0
    assert t.lead_suit() is Suit.SPADE
    with pytest.raises(RuntimeError):
        t.winner()


def test_tracker_play_and_resolve():
    tr = tracker()
    tr.play(2, parse_card("2S"))
    tr.play(0, parse_card("AC"))
    tr.play(1, parse_card("3C"))
    assert tr.current_trick() == ((2, parse_card("2S")), (0, parse_card("AC")), (1, parse_card("3C")))
    done = tr.resolve()
    assert done.taker == 2
    assert done.points == Fraction(5, 3)
    assert tr.current_player() == 2
    assert tr.void_suits(0) == {Suit.SPADE}
    assert tr.void_suits(2) == set()
    assert len(tr.cards_in_play()) == 6


def test_rejections_leave_state_untouched():
    tr = tracker()
    with pytest.raises(NotPlayerTurn):
        tr.play(0, parse_card("4D"))
    with pytest.raises(NotPlayerTurn):
        tr.play(7, parse_card("4D"))
    with pytest.raises(CardNotInHand):
        tr.play(2, parse_card("AD"))
    tr.play(2, parse_card("2C"))
    with pytest.raises(IllegalPlay):
        tr.play(0, parse_card("4D"))
    assert tr.hand(0) == tuple(cards("4D", "AC"))
    assert tr.current_trick() == ((2, parse_card("2C")),)


def test_legal_cards_follow_lead():
    tr = tracker()
    assert tr.legal_cards(0) == cards("4D", "AC")
    tr.play(2, parse_card("2C"))
    assert tr.legal_cards(0) == cards("AC")
    assert tr.legal_cards(1) == cards("3C")


def test_game_logs_trick_resolution(caplog):
    from game import Game

    g = Game.from_hands([cards("4D"), cards("AD"), cards("2S"), cards("2C")])
    with caplog.at_level(logging.DEBUG, logger="game"):
        for seat, c in enumerate(["4D", "AD", "2S", "2C"]):
            g.play(seat, parse_card(c))
    assert any("Smazzata finita" in r.getMessage() for r in caplog.records)
