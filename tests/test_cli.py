import pytest

from printfmt.cli import main


def _lines(capsys):
    assert main([]) == 0
    return capsys.readouterr().out.splitlines()


def test_each_sample_matches_reference(capsys):
    lines = _lines(capsys)
    assert len(lines) == 23
    assert lines[0:22:2] == lines[1:22:2]


def test_known_lines_present(capsys):
    lines = _lines(capsys)
    assert lines[0] == "Let's try to printf a simple sentence."
    assert lines.count("Negative:[-762534]") == 2
    assert lines.count("String:[I am a string !]") == 2
    assert lines.count("Percent:[%]") == 2
    assert lines.count("Address:[0x7ffe63]") == 2


def test_unknown_line_is_last(capsys):
    lines = _lines(capsys)
    assert lines[-1] == "Unknown:[(llun)]"


def test_length_line_reports_sentence_length(capsys):
    lines = _lines(capsys)
    expected = len(lines[0]) + 1
    assert lines[2] == f"Length:[{expected}, {expected}]"


def test_help_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "printfmt" in capsys.readouterr().out