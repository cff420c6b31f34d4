import pytest

from hls_playlist.config import DEFAULT_CONFIG_FILE, Settings, load_settings


def test_defaults_without_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = load_settings()

    assert result.is_right()
    assert result.value == Settings()


def test_default_file_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / DEFAULT_CONFIG_FILE).write_text("lang: fr\nstrict: true\nlog_level: info\n")

    result = load_settings()

    assert result.value == Settings(lang="fr", log_level="INFO", strict=True)


def test_explicit_file_and_unknown_keys(tmp_path):
    config_file = tmp_path / "custom.yml"
    config_file.write_text("log_level: DEBUG\ncolour: blue\n")

    result = load_settings(config_file)

    assert result.value == Settings(log_level="DEBUG")


def test_empty_file_gives_defaults(tmp_path):
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")

    assert load_settings(config_file).value == Settings()


def test_explicit_missing_file(tmp_path):
    result = load_settings(tmp_path / "missing.yml")

    assert result.is_left()
    assert "not found" in result.monoid[0].message


@pytest.mark.parametrize(
    "content, message",
    [
        ("lang: [en, fr]", "'lang' must be a string"),
        ("log_level: LOUD", "Unknown log level"),
        ("strict: sometimes", "'strict' must be true or false"),
        ("- just\n- a list", "must be a mapping"),
        ("strict: [unclosed", "Could not load configuration"),
    ],
)
def test_invalid_configuration(tmp_path, content, message):
    config_file = tmp_path / "bad.yml"
    config_file.write_text(content)

    result = load_settings(config_file)

    assert result.is_left()
    assert message in result.monoid[0].message
