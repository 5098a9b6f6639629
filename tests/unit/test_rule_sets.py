"""Tests for options and rule set configuration."""
import json

import pytest

from poker_hands.evaluation.exceptions import RuleSetError
from poker_hands.evaluation.options import DEFAULT_OPTIONS, Options, Sorting
from poker_hands.evaluation.rule_sets import RuleSetLoader, get_rule_set, rule_set_loader


def test_default_options():
    assert DEFAULT_OPTIONS == Options()
    assert DEFAULT_OPTIONS.sorting == Sorting.HIGH
    assert not DEFAULT_OPTIONS.ignore_straights
    assert not DEFAULT_OPTIONS.ignore_flushes
    assert not DEFAULT_OPTIONS.ace_is_low


def test_options_are_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_OPTIONS.ace_is_low = True


def test_options_from_dict_round_trip():
    options = Options(sorting=Sorting.LOW, ignore_flushes=True)
    assert Options.from_dict(options.to_dict()) == options
    assert Options.from_dict({}) == Options()


@pytest.mark.parametrize("data", [
    {"sorting": "middle"},
    {"ace_is_low": "yes"},
    {"ignore_straights": 1},
    {"wild_cards": True},
])
def test_options_from_dict_invalid(data):
    with pytest.raises(RuleSetError):
        Options.from_dict(data)


def test_bundled_rule_sets():
    rule_sets = rule_set_loader.get_all()
    assert {"high", "low", "a5_low"} <= set(rule_sets)

    assert get_rule_set("high") == Options()
    assert get_rule_set("low") == Options(sorting=Sorting.LOW)
    assert get_rule_set("a5_low") == Options(
        sorting=Sorting.LOW, ignore_straights=True, ignore_flushes=True, ace_is_low=True
    )
    assert rule_sets["a5_low"].name == "A-5 Low"


def test_unknown_rule_set():
    with pytest.raises(RuleSetError):
        get_rule_set("badugi")


def test_loader_reads_custom_directory(tmp_path):
    (tmp_path / "no_flush.json").write_text(json.dumps({
        "name": "No Flush",
        "options": {"ignore_flushes": True},
    }))
    loader = RuleSetLoader(tmp_path)

    rule_set = loader.get_rule_set("no_flush")
    assert rule_set.id == "no_flush"
    assert rule_set.name == "No Flush"
    assert rule_set.options == Options(ignore_flushes=True)


def test_loader_rejects_invalid_file(tmp_path):
    (tmp_path / "broken.json").write_text("{not json")
    with pytest.raises(RuleSetError):
        RuleSetLoader(tmp_path).load_all()


def test_loader_rejects_invalid_options(tmp_path):
    (tmp_path / "bad.json").write_text(json.dumps({"options": {"sorting": "sideways"}}))
    with pytest.raises(RuleSetError):
        RuleSetLoader(tmp_path).load_all()


def test_loader_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        RuleSetLoader(tmp_path / "missing").load_all()
