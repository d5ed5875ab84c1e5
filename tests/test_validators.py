import pytest
from datetime import datetime, timedelta
from app.models import Location, MenuName
from app.services.exceptions import InvalidEnum, InvalidId, InvalidTime
from app.utils.validators import (
    find_enum_insensitive, is_in_enum, is_parsable_time, is_valid_time,
    parse_page, parse_room_id, parse_time, split_names
)

BASE = datetime(2024, 1, 1, 10, 0, 0)

@pytest.mark.parametrize('delta', [
    timedelta(0),
    timedelta(minutes=30),
    timedelta(minutes=59, seconds=59),
    timedelta(hours=1),
])
def test_times_within_an_hour_conflict(delta):
    assert is_valid_time(BASE, BASE + delta) is False
    assert is_valid_time(BASE + delta, BASE) is False

@pytest.mark.parametrize('delta', [
    timedelta(hours=1, seconds=1),
    timedelta(hours=1, minutes=30),
    timedelta(days=1),
])
def test_times_more_than_an_hour_apart_are_valid(delta):
    assert is_valid_time(BASE, BASE + delta) is True
    assert is_valid_time(BASE + delta, BASE) is True
    assert is_valid_time(BASE, BASE - delta) is True

def test_custom_gap():
    assert is_valid_time(BASE, BASE + timedelta(minutes=31), gap=timedelta(minutes=30)) is True
    assert is_valid_time(BASE, BASE + timedelta(minutes=30), gap=timedelta(minutes=30)) is False

def test_parse_time():
    assert parse_time('2024-01-01 10:00:00') == BASE
    assert parse_time('default') is None

@pytest.mark.parametrize('value', ['2024/01/01 10:00:00', '2024-01-01T10:00:00', '2024-01-01', '', None, 'DEFAULT'])
def test_parse_time_rejects_other_formats(value):
    with pytest.raises(InvalidTime) as exc:
        parse_time(value)
    assert exc.value.code == -1
    assert is_parsable_time(value) is False

def test_parse_time_with_explicit_pattern():
    assert parse_time('01/01/2024 10:00', pattern='%d/%m/%Y %H:%M') == BASE

def test_parse_room_id():
    assert parse_room_id('42') == 42
    assert parse_room_id(7) == 7
    for bad in ['abc', '', None, '4.2']:
        with pytest.raises(InvalidId):
            parse_room_id(bad)

def test_enum_lookup_is_case_insensitive():
    assert find_enum_insensitive(Location, 'GaEpO') is Location.GAEPO
    assert find_enum_insensitive(MenuName, ' pizza ') is MenuName.PIZZA
    assert is_in_enum(Location, 'default') is True
    assert is_in_enum(Location, 'busan') is False

@pytest.mark.parametrize('value', ['busan', '', 'korean', None])
def test_unknown_location_raises_invalid_enum(value):
    with pytest.raises(InvalidEnum) as exc:
        find_enum_insensitive(Location, value)
    assert exc.value.code == -4

def test_split_names():
    assert split_names('korean,pizza') == ['korean', 'pizza']
    assert split_names('korean, ,pizza,') == ['korean', 'pizza']
    assert split_names(['korean', ' chinese ']) == ['korean', 'chinese']
    assert split_names(None) == []

def test_parse_page():
    assert parse_page(None) == 1
    assert parse_page('3') == 3
    for bad in ['abc', 0, '-1', '']:
        with pytest.raises(InvalidId) as exc:
            parse_page(bad)
        assert exc.value.code == -1
