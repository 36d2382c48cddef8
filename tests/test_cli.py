import pytest

from solong.cli import error_message, main
from solong.mapcheck import MapErrorKind


@pytest.mark.parametrize(
    "kind, expected",
    [
        (MapErrorKind.UNREADABLE, "ERROR!\nYou gave me a bad arquive!!!!!\n"),
        (MapErrorKind.LAYOUT, "ERROR!\nYou gave me a map with Bad characters or length\n"),
        (MapErrorKind.NOT_CLOSED, "ERROR!\nYou gave me a Open map! Can't play this shit!\n"),
        (MapErrorKind.COUNTS, "ERROR!\nYou gave me a bad quantity of charcters\n"),
        (MapErrorKind.IMPOSSIBLE, "ERROR!\nHow do you want me to play an IMPOSSIBLE map?\n"),
    ],
)
def test_error_message(kind, expected):
    assert error_message(kind) == expected
    assert error_message(int(kind)) == expected


def test_unknown_error_kind():
    with pytest.raises(ValueError):
        error_message(5)


def test_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "You need to give A file!\n"


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 0
    assert capsys.readouterr().out == "You need to give ONE file!\n"


def test_wrong_extension(capsys):
    status = main(["map.txt"])
    out = capsys.readouterr().out
    assert out == "not .ber"
    assert status == len(out)


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nothing.ber")]) == 0
    assert capsys.readouterr().out == error_message(MapErrorKind.UNREADABLE)


@pytest.mark.parametrize(
    "text, kind",
    [
        ("11X11\n1PCE1\n11111\n", MapErrorKind.LAYOUT),
        ("1111\n1PCE1\n11111\n", MapErrorKind.LAYOUT),
        ("11111\n1PCE0\n11111\n", MapErrorKind.NOT_CLOSED),
        ("11111\n1P0E1\n11111\n", MapErrorKind.COUNTS),
        ("1111111\n1P1C0E1\n1111111\n", MapErrorKind.IMPOSSIBLE),
    ],
)
def test_rejected_maps(tmp_path, capsys, text, kind):
    path = tmp_path / "map.ber"
    path.write_text(text)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == error_message(kind)


def test_empty_map_is_layout_error(tmp_path, capsys):
    path = tmp_path / "empty.ber"
    path.write_text("")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == error_message(MapErrorKind.LAYOUT)