"""
Game Controller

Drives an interactive ``play`` command: prompts for guesses until the
session ends, then records and persists the outcome.
"""

from typing import Callable

from ..config.game_settings import MAX_ROUNDS
from ..config.theme import get_theme
from ..exceptions import InvalidGuess
from ..models.player import Player
from ..services.game_service import FEEDBACK_STANDARD, GameSession
from ..services.player_repository import PlayerRepository
from ..services.stats_service import apply_outcome
from ..services.word_service import WordSource
from ..utils.display import render_board, render_keyboard
from ..utils.game_logger import game_logger


def play_game(player: Player,
              repository: PlayerRepository,
              word_source: WordSource,
              feedback_rule: str = FEEDBACK_STANDARD,
              read_line: Callable[[str], str] = input,
              echo: Callable[[str], None] = print) -> Player:
    """
    Play one game to completion and persist the updated statistics.

    Rejected guesses are reported and re-prompted without using an attempt.
    Nothing is saved unless the session reaches a terminal state; an
    interrupt or closed input propagates to the caller.

    Args:
        player: Profile loaded at startup
        repository: Where the updated profile is saved
        word_source: Supplies the answer and validates guesses
        feedback_rule: "standard" or "legacy" duplicate-letter handling
        read_line: Prompt function returning one line of input
        echo: Output function for one block of text

    Returns:
        The updated Player, already saved
    """
    game_logger.log_user_action('play', hard_mode=player.hard_mode, feedback_rule=feedback_rule)

    session = GameSession(player, word_source.random_word(), word_source, feedback_rule)
    theme = get_theme(player.high_contrast)
    game_logger.log_game_event('game_started', max_rounds=MAX_ROUNDS)

    echo("--- START OF CLIORDLE GAME ---")
    while not session.is_terminal:
        raw = read_line(f"Guess {session.attempt}/{MAX_ROUNDS}: ")
        try:
            state = session.submit_guess(raw)
        except InvalidGuess as e:
            game_logger.log_user_action('submit_guess', guess=e.guess, accepted=False, reason=e.reason)
            echo(f"{e.guess} is an invalid guess, try again ({e.reason})")
            continue

        game_logger.log_user_action('submit_guess', guess=state.guesses[-1], accepted=True,
                                    round=state.current_round)
        echo(render_board(state, theme))
        echo(render_keyboard(state, theme))
        echo("")

    outcome = session.finish()
    if outcome.solved:
        echo(f"Impressive! You got the word in {outcome.attempts} guesses")
        game_logger.log_game_event('game_won', rounds_used=outcome.attempts, target_word=outcome.answer)
    else:
        echo(f"The answer was {outcome.answer}")
        game_logger.log_game_event('game_lost', rounds_used=outcome.attempts, target_word=outcome.answer)

    updated = apply_outcome(player, outcome)
    repository.save(updated)
    return updated
