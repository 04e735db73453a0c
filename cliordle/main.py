"""
Cliordle - Main Entry Point

Parses the command line, wires the store, repository and word source
together and dispatches to the ``play``, ``settings`` or ``stats`` command.
"""

import argparse
import sys
from typing import Callable, List, Optional

from .config.app_config import get_config
from .controllers.game_controller import play_game
from .controllers.player_controller import change_settings, show_stats
from .exceptions import CliordleError
from .services.game_service import FEEDBACK_RULES
from .services.player_repository import PlayerRepository
from .services.word_service import WordSource
from .storage import KeyValueStore, create_store
from .utils.game_logger import game_logger

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

_TRUE_VALUES = ('1', 't', 'true', 'y', 'yes', 'on')
_FALSE_VALUES = ('0', 'f', 'false', 'n', 'no', 'off')


def str2bool(value: str) -> bool:
    """argparse type for ``--flag=<bool>`` options."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cliordle',
        description='Guess the five-letter word in six tries.'
    )
    subparsers = parser.add_subparsers(dest='command', metavar='{play,settings,stats}')

    subparsers.add_parser('play', help='start an interactive game')

    settings_parser = subparsers.add_parser('settings', help='change and show preferences')
    settings_parser.add_argument('--highContrast', dest='high_contrast', type=str2bool,
                                 nargs='?', const=True, default=None, metavar='BOOL',
                                 help='turn high-contrast mode on/off')
    settings_parser.add_argument('--hardMode', dest='hard_mode', type=str2bool,
                                 nargs='?', const=True, default=None, metavar='BOOL',
                                 help='turn hard mode on/off')

    subparsers.add_parser('stats', help='show statistics')
    return parser


def main(argv: Optional[List[str]] = None,
         config_class=None,
         store: Optional[KeyValueStore] = None,
         word_source: Optional[WordSource] = None,
         read_line: Callable[[str], str] = input) -> int:
    """
    Run one command and return the process exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` by default
        config_class: Configuration class; resolved from CLIORDLE_ENV by default
        store: Key-value store to use instead of the configured one
        word_source: Word source to use instead of the configured word list
        read_line: Prompt function for interactive input

    Returns:
        0 on success, 1 on any unrecoverable error, 130 when interrupted
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_usage(sys.stderr)
        print("error: play, settings, or stats subcommand required", file=sys.stderr)
        return EXIT_ERROR

    config_class = config_class or get_config()
    owns_store = store is None

    try:
        if store is None:
            store = create_store(config_class)
        repository = PlayerRepository(store)
        player = repository.load()

        if args.command == 'play':
            if config_class.FEEDBACK_RULE not in FEEDBACK_RULES:
                raise CliordleError(
                    f"FEEDBACK_RULE must be one of {', '.join(FEEDBACK_RULES)}, "
                    f"got '{config_class.FEEDBACK_RULE}'"
                )
            if word_source is None:
                word_source = WordSource.from_file(config_class.WORD_LIST_PATH,
                                                   config_class.ALLOWED_GUESSES_PATH)
            play_game(player, repository, word_source, config_class.FEEDBACK_RULE, read_line=read_line)
        elif args.command == 'settings':
            change_settings(player, repository, args.high_contrast, args.hard_mode)
        else:
            show_stats(player)

    except KeyboardInterrupt:
        # Unfinished games are not recorded
        print()
        game_logger.logger.info(f"Command '{args.command}' interrupted")
        return EXIT_INTERRUPTED
    except EOFError:
        game_logger.logger.warning(f"Input closed during '{args.command}'")
        print("error: input closed before the game finished", file=sys.stderr)
        return EXIT_ERROR
    except CliordleError as e:
        game_logger.log_error(e, args.command)
        if config_class.DEBUG:
            game_logger.logger.error(f"Traceback for '{args.command}'", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR
    finally:
        if owns_store and store is not None:
            store.close()

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
