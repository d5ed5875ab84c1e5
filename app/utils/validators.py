"""
Parsing and membership helpers shared by the room services.

Nothing here keeps state: the pattern or enumeration to check against is
always passed in by the caller.
"""
from datetime import datetime, timedelta

from app.services.exceptions import InvalidEnum, InvalidId, InvalidTime

# yyyy-MM-dd HH:mm:ss
TIME_FORMAT = '%Y-%m-%d %H:%M:%S'
DEFAULT = 'default'


def is_default(value) -> bool:
    return value == DEFAULT


def parse_time(value, pattern: str = TIME_FORMAT):
    """Return the parsed datetime, or None for the "default" sentinel."""
    if is_default(value):
        return None
    if not isinstance(value, str):
        raise InvalidTime()
    try:
        return datetime.strptime(value, pattern)
    except ValueError:
        raise InvalidTime(f'Unparsable time: {value!r}')


def is_parsable_time(value, pattern: str = TIME_FORMAT) -> bool:
    try:
        parse_time(value, pattern)
    except InvalidTime:
        return False
    return True


def parse_room_id(value) -> int:
    if isinstance(value, bool):
        raise InvalidId()
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidId(f'Invalid room id: {value!r}')


def find_enum_insensitive(enum_cls, name):
    """Match an enum member by name or value, ignoring case."""
    if not isinstance(name, str):
        raise InvalidEnum(f'{enum_cls.__name__} expects a string, got {name!r}')
    wanted = name.strip().lower()
    for member in enum_cls:
        if member.name.lower() == wanted or str(member.value).lower() == wanted:
            return member
    raise InvalidEnum(f'{name!r} is not a valid {enum_cls.__name__}')


def is_in_enum(enum_cls, name) -> bool:
    if is_default(name):
        return True
    try:
        find_enum_insensitive(enum_cls, name)
    except InvalidEnum:
        return False
    return True


def split_names(value):
    """Accept "a,b,c" or an iterable of names; blank entries are dropped."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(',')
    names = []
    for v in value:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                continue
        names.append(v)
    return names


def is_valid_time(time1: datetime, time2: datetime, gap: timedelta = timedelta(hours=1)) -> bool:
    """
    True when the two meeting times are more than ``gap`` apart.
    11:00 / 12:00:01 -> True, 11:00 / 11:30 or 10:30 -> False, equal -> False.
    """
    if time1 > time2:
        return time2 + gap < time1
    return time1 + gap < time2


def parse_page(value) -> int:
    """Positive page number / page size; None means the first page."""
    if value is None:
        return 1
    number = parse_room_id(value)
    if number < 1:
        raise InvalidId(f'Page values start at 1, got {value!r}')
    return number
