import pytest

from openmenu.genres import (
    Accessory,
    Genre,
    MetaRecord,
    accessory_from_name,
    genre_from_name,
    parse_accessories,
    parse_genres,
)


def test_genre_from_name_known():
    assert genre_from_name("RPG") is Genre.RPG
    assert genre_from_name("Music") is Genre.MUSIC


def test_genre_from_name_unknown_is_none():
    assert genre_from_name("Cooking") == Genre.NONE


def test_accessory_from_name():
    assert accessory_from_name("GUN") is Accessory.LIGHTGUN
    assert accessory_from_name("-") == Accessory.NONE
    assert accessory_from_name("WAT") == Accessory.NONE


def test_parse_genres_combines():
    assert parse_genres("Action+Racing") == Genre.ACTION | Genre.RACING


def test_parse_genres_zero_and_empty():
    assert parse_genres("0") == Genre.NONE
    assert parse_genres("") == Genre.NONE


def test_parse_genres_skips_unknown():
    assert parse_genres("Puzzle+Bogus") == Genre.PUZZLE


def test_parse_accessories_combines():
    assert parse_accessories("JUMP+VGA") == Accessory.JUMP_PACK | Accessory.VGA
    assert parse_accessories("0") == Accessory.NONE


def test_record_size_matches_layout():
    assert len(MetaRecord().pack()) == 384


def test_record_round_trip():
    record = MetaRecord(
        num_players=4,
        vmu_blocks=12,
        accessories=Accessory.JUMP_PACK | Accessory.VGA,
        network=1,
        genre=Genre.SPORTS | Genre.ARCADE,
        description="A test game.",
    )
    assert MetaRecord.unpack(record.pack()) == record


def test_record_field_positions():
    record = MetaRecord(num_players=2, vmu_blocks=7, genre=Genre.RPG, description="hi")
    data = record.pack()
    assert data[0] == 2
    assert data[1] == 7
    assert data[4:6] == int(Genre.RPG).to_bytes(2, "little")
    assert data[8:10] == b"hi"
    assert data[10] == 0


def test_unpack_short_data_raises():
    with pytest.raises(ValueError):
        MetaRecord.unpack(b"\x00" * 10)