import pytest

from solong.mapcheck import (
    GameMap,
    MapError,
    MapErrorKind,
    check_characters,
    check_closed,
    check_counts,
    check_possible,
    load_map,
    parse_map,
    read_lines,
)

VALID = "1111111\n1P0C0E1\n1111111\n"


def write(tmp_path, text):
    path = tmp_path / "map.ber"
    path.write_text(text)
    return path


def test_load_valid_map(tmp_path):
    game_map = load_map(write(tmp_path, VALID))
    assert isinstance(game_map, GameMap)
    assert game_map.width == 7
    assert game_map.height == 3
    assert game_map.player_pos == (1, 1)
    assert game_map.exit_pos == (5, 1)
    assert game_map.collectibles == 1
    assert game_map.rows == VALID.splitlines()


def test_read_lines_keeps_newlines(tmp_path):
    assert read_lines(write(tmp_path, "11\n11")) == ["11\n", "11"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError) as info:
        read_lines(tmp_path / "absent.ber")
    assert info.value.kind is MapErrorKind.UNREADABLE


def test_check_characters():
    assert check_characters("10PCET\n")
    assert not check_characters("10X\n")


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("", MapErrorKind.LAYOUT),
        ("1111111\n1P0C0E1\n1111111", MapErrorKind.LAYOUT),
        ("1111111\n1P0X0E1\n1111111\n", MapErrorKind.LAYOUT),
        ("1111111\n1P0C0E1\n11111\n", MapErrorKind.LAYOUT),
        ("1111111\n0P0C0E1\n1111111\n", MapErrorKind.NOT_CLOSED),
        ("1111111\n1PPC0E1\n1111111\n", MapErrorKind.COUNTS),
        ("1111111\n1P000E1\n1111111\n", MapErrorKind.COUNTS),
        ("1111111\n1P0CEE1\n1111111\n", MapErrorKind.COUNTS),
        ("1111111\n1P1C0E1\n1111111\n", MapErrorKind.IMPOSSIBLE),
        ("1111111\n1PTC0E1\n1111111\n", MapErrorKind.IMPOSSIBLE),
        ("111111\n1PCE11\n111101\n111111\n", MapErrorKind.IMPOSSIBLE),
    ],
)
def test_rejected_maps(tmp_path, text, kind):
    with pytest.raises(MapError) as info:
        load_map(write(tmp_path, text))
    assert info.value.kind is kind


@pytest.mark.parametrize(
    ("text", "code"),
    [
        ("", 1),
        ("1111111\n0P0C0E1\n1111111\n", 2),
        ("1111111\n1P000E1\n1111111\n", 3),
        ("1111111\n1P1C0E1\n1111111\n", 4),
    ],
)
def test_error_codes_match_exit_numbers(tmp_path, text, code):
    with pytest.raises(MapError) as info:
        load_map(write(tmp_path, text))
    assert int(info.value.kind) == code


def test_unreadable_error_code_is_six(tmp_path):
    with pytest.raises(MapError) as info:
        load_map(tmp_path / "absent.ber")
    assert int(info.value.kind) == 6


def test_parse_map_with_trap():
    lines = ["11111\n", "1PCE1\n", "1T001\n", "11111\n"]
    game_map = parse_map(lines)
    assert game_map.grid[2][1] == "T"
    assert game_map.collectibles == 1


def test_check_closed_leaves_right_corners_unchecked():
    assert check_closed(["1110", "1001", "1111"], 4)
    assert not check_closed(["1111", "1000", "1111"], 4)


def test_check_counts():
    assert check_counts(["1PCE1"])
    assert not check_counts(["1PCC1"])


def test_check_possible_exit_does_not_block():
    rows = ["111111", "1PEC01", "111111"]
    assert check_possible(rows)


def test_check_possible_without_player():
    assert not check_possible(["11111", "10CE1", "11111"])


def test_check_possible_does_not_modify_rows():
    rows = ["1111111", "1P0C0E1", "1111111"]
    copy = list(rows)
    check_possible(rows)
    assert rows == copy


def test_map_error_message_and_kind():
    error = MapError(MapErrorKind.COUNTS)
    assert error.kind is MapErrorKind.COUNTS
    assert str(error)
    assert str(MapError(MapErrorKind.COUNTS, "custom")) == "custom"