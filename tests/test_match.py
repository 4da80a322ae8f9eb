import random

import pytest

from agents import HeuristicAgent, RandomAgent
from errors import InvalidGameState, InvalidPlayerCount
from game import GamePhase, Match
from rules import SCORE_TO_WIN


def finish(game, agents):
    while game.phase is GamePhase.IN_PROGRESS:
        seat = game.current_player
        game.play(seat, agents[seat].choose(game.view(seat)))
    return game.result


def test_match_runs_until_a_team_reaches_target():
    rng = random.Random(99)
    match = Match(4, rng)
    agents = [HeuristicAgent(), RandomAgent(random.Random(1)), HeuristicAgent(), RandomAgent(random.Random(2))]
    while not match.is_completed():
        game = match.new_game()
        finish(game, agents)
        match.record(game)

    assert max(match.score.values()) >= SCORE_TO_WIN
    assert match.winner is not None
    assert match.score[match.winner] > match.score[1 - match.winner]
    # ogni smazzata vale 11 punti
    assert sum(match.score.values()) == 11 * len(match.games)
    with pytest.raises(InvalidGameState):
        match.new_game()


def test_leader_rotates_each_game():
    match = Match(4, random.Random(3))
    agents = [RandomAgent(random.Random(s)) for s in range(4)]
    leaders = []
    for _ in range(3):
        game = match.new_game()
        leaders.append(game.current_player)
        finish(game, agents)
        match.record(game)
    assert leaders == [0, 1, 2]


def test_unfinished_game_cannot_be_recorded_or_skipped():
    match = Match(4, random.Random(4))
    game = match.new_game()
    with pytest.raises(InvalidGameState):
        match.record(game)
    with pytest.raises(InvalidGameState):
        match.new_game()


def test_game_recorded_once():
    match = Match(2, random.Random(5))
    game = match.new_game()
    finish(game, [RandomAgent(random.Random(0)), RandomAgent(random.Random(1))])
    match.record(game)
    with pytest.raises(InvalidGameState):
        match.record(game)
    assert sum(match.score.values()) == 11


def test_match_rejects_bad_player_count():
    with pytest.raises(InvalidPlayerCount):
        Match(3, random.Random(0))
