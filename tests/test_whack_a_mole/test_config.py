import pytest
from whack_a_mole.config import MoleConfig


def test_defaults():
    config = MoleConfig()
    assert config.duration_sec == 30
    assert config.board_size == 9
    assert config.spawn_interval_ms == 600
    assert config.show_time_ms == 800
    assert config.hit_despawn_ms == 100
    assert config.low_time_warning_sec == 5
    assert config.columns is None


def test_from_options_overrides_and_converts():
    config = MoleConfig.from_options({"duration_sec": "2", "board_size": 4, "columns": None})
    assert config.duration_sec == 2
    assert config.board_size == 4
    assert config.columns is None
    assert config.show_time_ms == 800


def test_from_options_accepts_missing_block():
    assert MoleConfig.from_options(None) == MoleConfig()


def test_unknown_option_is_rejected():
    with pytest.raises(ValueError, match="unknown option"):
        MoleConfig.from_options({"difficulty": 3})


@pytest.mark.parametrize("options", [
    {"board_size": "nine"},
    {"duration_sec": 2.9},
    {"show_time_ms": 800.7},
    {"board_size": True},
    {"columns": False},
])
def test_non_integer_option_is_rejected(options):
    with pytest.raises(ValueError, match="integer"):
        MoleConfig.from_options(options)


def test_whole_float_option_is_accepted():
    assert MoleConfig.from_options({"show_time_ms": 800.0}).show_time_ms == 800


@pytest.mark.parametrize("field", ["duration_sec", "board_size", "spawn_interval_ms", "show_time_ms", "hit_despawn_ms", "columns"])
def test_non_positive_values_are_rejected(field):
    with pytest.raises(ValueError):
        MoleConfig(**{field: 0})


def test_negative_low_time_warning_is_rejected():
    with pytest.raises(ValueError):
        MoleConfig(low_time_warning_sec=-1)
