"""Découpage des commandes slash et nettoyage des noms d'items."""

from core.commands import parse_args, parse_command
from core.item import clean_item_name, item_name_from_link, make_item_link


def test_brackets_keep_spaces():
    assert parse_args("save weps [Aurastone Hammer] [Mace of Unending Life]") == [
        "save", "weps", "[Aurastone Hammer]", "[Mace of Unending Life]",
    ]


def test_extra_whitespace_collapsed():
    assert parse_args("  list   ") == ["list"]
    assert parse_args("") == []


def test_full_link_is_one_token():
    lnk = make_item_link("Totem of Rage", 22395, "ff0070dd")
    assert parse_args(f"save t {lnk} [Totem of Sustaining]") == ["save", "t", lnk, "[Totem of Sustaining]"]


def test_known_command_case_insensitive():
    cmd = parse_command("DELETE weps")
    assert cmd.name == "delete"
    assert cmd.arg(0) == "weps"
    assert cmd.arg(1) is None


def test_unknown_word_arms_preset():
    cmd = parse_command("Weps")
    assert cmd.name == "arm"
    assert cmd.args == ["weps"]


def test_whitespace_only_arms_manual():
    cmd = parse_command("   ")
    assert cmd.name == "arm"
    assert cmd.args == [""]


def test_clean_item_name_variants():
    lnk = "|cff9d9d9d|Hitem:2140:0:0:0|h[Aurastone Hammer]|h|r"
    assert clean_item_name(lnk) == "aurastone hammer"
    assert clean_item_name("[Mace of Unending Life]") == "mace of unending life"
    assert clean_item_name("Hearthstone") == "hearthstone"
    assert clean_item_name(None) is None


def test_item_name_from_link():
    assert item_name_from_link(make_item_link("Totem of Rage")) == "totem of rage"
    assert item_name_from_link(None) is None
    assert item_name_from_link("no brackets") is None
