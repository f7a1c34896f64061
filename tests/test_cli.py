"""
Tests for the command-line interface.
"""
import pytest

import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("NO_COLOR", "YMLDIFF_NO_COLOR", "YMLDIFF_NO_DOC_COMMENT", "YMLDIFF_DISABLE_COMMENTS"):
        monkeypatch.delenv(name, raising=False)
    # Keep a stray .env in the working directory out of the settings
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def files(write_yaml):
    old = write_yaml("old.yaml", "# config\nname: John\nage: 30\n")
    new = write_yaml("new.yaml", "# config\nname: Jane\nage: 30\n")
    return old, new


def test_compare(files, capsys):
    assert cli.main([*files, "-n"]) == 0
    out = capsys.readouterr().out
    assert out == "--- # YAML Document: 1/1\n# config\n~ .name: John → Jane\n\n"


def test_combined_short_flags(files, capsys):
    assert cli.main(["-cdn", *files]) == 0
    assert capsys.readouterr().out == "---\n~ .name: John → Jane\n\n"


def test_long_flags(files, capsys):
    assert cli.main(["--disable-comments", "--no-doc-comment", "--no-color", *files]) == 0
    assert capsys.readouterr().out == "---\n~ .name: John → Jane\n\n"


def test_no_changes_exit_zero(write_yaml, capsys):
    old = write_yaml("a.yaml", "a: [1, 2]\n")
    new = write_yaml("b.yaml", "a: [2, 1]\n")
    assert cli.main([old, new]) == 0
    assert capsys.readouterr().out == "No changes found.\n"


@pytest.mark.parametrize("argv", [[], ["only.yaml"], ["a.yaml", "b.yaml", "c.yaml"]])
def test_usage_error(argv, capsys):
    assert cli.main(argv) == 1
    captured = capsys.readouterr()
    assert "Expected exactly 2 YAML files" in captured.err
    assert captured.out == ""


def test_parse_error(write_yaml, capsys):
    old = write_yaml("old.yaml", "a: 1\n")
    bad = write_yaml("bad.yaml", "a: [1\n")
    assert cli.main([old, bad]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Error parsing {bad}:" in captured.err


def test_settings_from_environment(files, capsys, monkeypatch):
    monkeypatch.setenv("YMLDIFF_NO_DOC_COMMENT", "true")
    monkeypatch.setenv("YMLDIFF_DISABLE_COMMENTS", "true")
    assert cli.main(list(files)) == 0
    assert capsys.readouterr().out == "---\n~ .name: John → Jane\n\n"


def test_should_use_color(monkeypatch):
    assert cli.should_use_color(no_color=True) is False
    monkeypatch.setenv("NO_COLOR", "1")
    assert cli.should_use_color() is False


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])
    assert exc_info.value.code == 0
    assert "ymldiff 1.0.0" in capsys.readouterr().out


def test_recursive_alias_reported(write_yaml, capsys):
    old = write_yaml("old.yaml", "a: []\n")
    new = write_yaml("new.yaml", "a: &x [*x]\n")
    assert cli.main([old, new, "-n"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Error parsing {new}:" in captured.err
