import pytest

from cliordle.models.game import GameOutcome
from cliordle.models.player import Player
from cliordle.services.stats_service import apply_outcome, update_settings

PLAYERS = [
    Player(),
    Player(games_played=10, games_won=7, current_streak=3, longest_streak=5,
           guess_distribution=[0, 1, 2, 3, 1, 0]),
    Player(games_played=4, games_won=4, current_streak=4, longest_streak=4,
           guess_distribution=[1, 1, 1, 1, 0, 0], high_contrast=True),
    Player(games_played=9, games_won=2, current_streak=0, longest_streak=2,
           guess_distribution=[0, 0, 0, 0, 0, 2], hard_mode=True),
]


@pytest.mark.parametrize("player", PLAYERS)
@pytest.mark.parametrize("attempts", [1, 2, 3, 4, 5, 6])
def test_win_updates(player, attempts):
    updated = apply_outcome(player, GameOutcome(solved=True, attempts=attempts, answer="crane"))

    assert updated.guess_distribution[attempts - 1] == player.guess_distribution[attempts - 1] + 1
    for i in range(6):
        if i != attempts - 1:
            assert updated.guess_distribution[i] == player.guess_distribution[i]
    assert updated.games_won == player.games_won + 1
    assert updated.games_played == player.games_played + 1
    assert updated.current_streak == player.current_streak + 1
    assert updated.longest_streak == max(player.longest_streak, player.current_streak + 1)
    assert updated.longest_streak >= updated.current_streak


@pytest.mark.parametrize("player", PLAYERS)
def test_loss_updates(player):
    updated = apply_outcome(player, GameOutcome(solved=False, attempts=6, answer="crane"))

    assert updated.current_streak == 0
    assert updated.games_played == player.games_played + 1
    assert updated.games_won == player.games_won
    assert updated.longest_streak == player.longest_streak
    assert updated.guess_distribution == player.guess_distribution


def test_default_player_after_one_loss(player):
    updated = apply_outcome(player, GameOutcome(solved=False, attempts=6, answer="crane"))
    assert updated.games_played == 1
    assert updated.games_won == 0
    assert updated.games_lost == 1
    assert updated.current_streak == 0
    assert updated.longest_streak == 0


def test_crane_win_increments_third_bucket(player):
    updated = apply_outcome(player, GameOutcome(solved=True, attempts=3, answer="crane"))
    assert updated.guess_distribution == [0, 0, 1, 0, 0, 0]


def test_input_player_is_not_mutated(seasoned_player):
    before = Player(**vars(seasoned_player))
    before.guess_distribution = list(seasoned_player.guess_distribution)
    apply_outcome(seasoned_player, GameOutcome(solved=True, attempts=2, answer="crane"))
    apply_outcome(seasoned_player, GameOutcome(solved=False, attempts=6, answer="crane"))
    assert seasoned_player == before


@pytest.mark.parametrize("attempts", [0, 7, -1, 100])
def test_solved_outcome_with_out_of_range_attempts_is_rejected(seasoned_player, attempts):
    with pytest.raises(ValueError):
        apply_outcome(seasoned_player, GameOutcome(solved=True, attempts=attempts, answer="crane"))


def test_streak_resets_then_rebuilds(player):
    win = GameOutcome(solved=True, attempts=4, answer="crane")
    loss = GameOutcome(solved=False, attempts=6, answer="crane")

    for outcome in [win, win, win, loss, win]:
        player = apply_outcome(player, outcome)

    assert player.current_streak == 1
    assert player.longest_streak == 3
    assert player.games_played == 5
    assert player.games_won == 4
    assert player.win_percentage == 80.0


def test_win_percentage_without_games(player):
    assert player.win_percentage == 0.0


def test_update_settings_overwrites_both_flags(seasoned_player):
    updated = update_settings(seasoned_player, high_contrast=True, hard_mode=True)
    assert updated.high_contrast is True
    assert updated.hard_mode is True
    assert updated.games_played == seasoned_player.games_played

    reverted = update_settings(updated, high_contrast=False, hard_mode=False)
    assert reverted.high_contrast is False
    assert reverted.hard_mode is False
