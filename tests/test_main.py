import argparse
import json

import pytest

from cliordle.config.app_config import TestingConfig
from cliordle.exceptions import StorageError
from cliordle.main import EXIT_ERROR, EXIT_INTERRUPTED, EXIT_OK, build_parser, main, str2bool
from cliordle.services.player_repository import PLAYER_BUCKET, PLAYER_KEY
from cliordle.storage.memory_store import MemoryStore

from conftest import FixedAnswerSource, scripted_input


def _stored(store):
    return json.loads(store.get(PLAYER_BUCKET, PLAYER_KEY).decode("utf-8"))


class BrokenStore(MemoryStore):

    def get(self, bucket, key):
        raise StorageError("could not open db, permission denied")


@pytest.mark.parametrize("value,expected", [
    ("true", True), ("True", True), ("1", True), ("yes", True),
    ("false", False), ("FALSE", False), ("0", False), ("off", False),
])
def test_str2bool(value, expected):
    assert str2bool(value) is expected


def test_str2bool_rejects_garbage():
    with pytest.raises(argparse.ArgumentTypeError):
        str2bool("maybe")


def test_settings_flags_parse_with_equals_syntax():
    args = build_parser().parse_args(["settings", "--highContrast=true", "--hardMode=false"])
    assert args.command == "settings"
    assert args.high_contrast is True
    assert args.hard_mode is False


def test_missing_subcommand_is_a_usage_error(capsys):
    assert main([], config_class=TestingConfig, store=MemoryStore()) == EXIT_ERROR
    err = capsys.readouterr().err
    assert "play, settings, or stats subcommand required" in err


def test_unknown_subcommand_exits_non_zero():
    with pytest.raises(SystemExit) as excinfo:
        main(["dance"], config_class=TestingConfig, store=MemoryStore())
    assert excinfo.value.code != 0


def test_stats_on_empty_store(capsys):
    store = MemoryStore()
    assert main(["stats"], config_class=TestingConfig, store=store) == EXIT_OK
    out = capsys.readouterr().out
    assert "Played: 0 | Win%: 0% | Current streak: 0 | Longest streak: 0" in out
    assert store.data == {}


def test_settings_are_persisted(capsys):
    store = MemoryStore()
    assert main(["settings", "--highContrast=true", "--hardMode=true"],
                config_class=TestingConfig, store=store) == EXIT_OK
    assert _stored(store)["hiContrast"] is True
    assert _stored(store)["hardMode"] is True
    assert "High-contrast\t|\ttrue" in capsys.readouterr().out

    assert main(["settings", "--hardMode=false"], config_class=TestingConfig, store=store) == EXIT_OK
    assert _stored(store)["hiContrast"] is True
    assert _stored(store)["hardMode"] is False


def test_play_then_stats(capsys):
    store = MemoryStore()
    code = main(["play"], config_class=TestingConfig, store=store,
                word_source=FixedAnswerSource("crane"),
                read_line=scripted_input(["train", "crate", "crane"]))
    assert code == EXIT_OK
    assert _stored(store)["stats"] == [0, 0, 1, 0, 0, 0]
    assert "Impressive! You got the word in 3 guesses" in capsys.readouterr().out

    assert main(["stats"], config_class=TestingConfig, store=store) == EXIT_OK
    assert "Played: 1 | Win%: 100% | Current streak: 1 | Longest streak: 1" in capsys.readouterr().out


def test_storage_failure_exits_with_one_diagnostic_line(capsys):
    assert main(["stats"], config_class=TestingConfig, store=BrokenStore()) == EXIT_ERROR
    err = capsys.readouterr().err
    assert err == "error: could not open db, permission denied\n"


def test_corrupt_player_data_is_fatal(capsys):
    store = MemoryStore()
    store.put(PLAYER_BUCKET, PLAYER_KEY, b"{not json")
    assert main(["stats"], config_class=TestingConfig, store=store) == EXIT_ERROR
    assert capsys.readouterr().err.startswith("error: could not unmarshal player data json")


def test_word_list_failure_is_fatal(tmp_path, capsys):
    class MissingWordsConfig(TestingConfig):
        WORD_LIST_PATH = str(tmp_path / "missing.json")

    store = MemoryStore()
    assert main(["play"], config_class=MissingWordsConfig, store=store,
                read_line=scripted_input([])) == EXIT_ERROR
    assert "could not load word list" in capsys.readouterr().err
    assert store.data == {}


def test_unknown_feedback_rule_is_fatal(capsys):
    class BadRuleConfig(TestingConfig):
        FEEDBACK_RULE = "lenient"

    assert main(["play"], config_class=BadRuleConfig, store=MemoryStore(),
                word_source=FixedAnswerSource("crane")) == EXIT_ERROR
    assert "FEEDBACK_RULE" in capsys.readouterr().err


def test_interrupt_does_not_save():
    def interrupt(prompt):
        raise KeyboardInterrupt

    store = MemoryStore()
    code = main(["play"], config_class=TestingConfig, store=store,
                word_source=FixedAnswerSource("crane"), read_line=interrupt)
    assert code == EXIT_INTERRUPTED
    assert store.data == {}


def test_closed_input_is_an_error(capsys):
    store = MemoryStore()
    code = main(["play"], config_class=TestingConfig, store=store,
                word_source=FixedAnswerSource("crane"), read_line=scripted_input(["train"]))
    assert code == EXIT_ERROR
    assert "input closed" in capsys.readouterr().err
    assert store.data == {}


def test_configured_sqlite_store_is_used_and_closed(tmp_path):
    class SqliteConfig(TestingConfig):
        STORAGE_BACKEND = "sqlite"
        DB_PATH = str(tmp_path / "cliordle.db")

    assert main(["settings", "--highContrast=true"], config_class=SqliteConfig) == EXIT_OK
    assert (tmp_path / "cliordle.db").exists()

    from cliordle.storage.sqlite_store import SqliteStore
    with SqliteStore(SqliteConfig.DB_PATH) as store:
        assert _stored(store)["hiContrast"] is True


def test_bare_settings_flag_means_true():
    args = build_parser().parse_args(["settings", "--highContrast"])
    assert args.high_contrast is True
    assert args.hard_mode is None


def test_bare_settings_flag_is_persisted():
    store = MemoryStore()
    assert main(["settings", "--hardMode"], config_class=TestingConfig, store=store) == EXIT_OK
    assert _stored(store)["hardMode"] is True
    assert _stored(store)["hiContrast"] is False
