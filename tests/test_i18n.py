import pytest

from hls_playlist import i18n
from hls_playlist.i18n import get_default_lang, get_message, set_lang


@pytest.fixture(autouse=True)
def english():
    """Leaves the module in English for the following tests."""
    set_lang("en")
    yield
    set_lang("en")


@pytest.mark.parametrize("tag", ["fr", "fr_FR", "fr-CA", "FR", "fr_FR.UTF-8"])
def test_set_lang_accepts_locale_style_tags(tag):
    set_lang(tag)

    assert get_message("playlist_valid", path="a.m3u8") == "La playlist 'a.m3u8' est valide."


def test_set_lang_falls_back_to_english():
    set_lang("de_DE")

    assert get_message("violation_invalid_version", version=99) == (
        "Version 99 is not supported (1 to 7)."
    )


def test_get_message_unknown_key_returns_the_key(caplog):
    assert get_message("no_such_message") == "no_such_message"
    assert "no_such_message" in caplog.text


def test_get_message_missing_placeholder_returns_template():
    assert get_message("playlist_valid") == "Playlist '{path}' is valid."


@pytest.mark.parametrize(
    "system_locale, expected",
    [(("fr_FR", "UTF-8"), "fr"), (("en_US", "UTF-8"), "en"), ((None, None), "en"), (("es_ES", "UTF-8"), "en")],
)
def test_get_default_lang_follows_system_locale(mocker, system_locale, expected):
    mocker.patch.object(i18n.locale, "getlocale", return_value=system_locale)

    assert get_default_lang() == expected


def test_get_default_lang_survives_broken_locale(mocker):
    mocker.patch.object(i18n.locale, "getlocale", side_effect=ValueError("unknown locale"))

    assert get_default_lang() == "en"
