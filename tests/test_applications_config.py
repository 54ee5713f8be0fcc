import pytest

from oxirun.applications_config import Config, get_config


def test_defaults_without_section():
    config = get_config({"plugins": ["libapplications.so"]})
    assert config == Config(max_entries=7, terminal="kitty")


def test_empty_section_keeps_defaults():
    assert get_config({"applications": {}}) == Config()


def test_partial_override_keeps_other_default():
    config = get_config({"applications": {"max_entries": 3}})
    assert config.max_entries == 3
    assert config.terminal == Config().terminal


def test_full_override():
    config = get_config({"applications": {"max_entries": 12, "terminal": "foot"}})
    assert config == Config(max_entries=12, terminal="foot")


def test_unknown_keys_are_ignored():
    config = get_config({"applications": {"terminal": "alacritty", "colour": "blue"}})
    assert config == Config(terminal="alacritty")


@pytest.mark.parametrize(
    "section",
    [
        {"max_entries": "seven"},
        {"max_entries": -1},
        {"max_entries": True},
        {"max_entries": 2.5},
        {"terminal": 5},
    ],
)
def test_wrong_types_raise(section):
    with pytest.raises(ValueError):
        get_config({"applications": section})


def test_section_must_be_table():
    with pytest.raises(ValueError):
        get_config({"applications": 4})