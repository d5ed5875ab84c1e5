import enum


class Location(enum.Enum):
    GAEPO = 'gaepo'
    SEOCHO = 'seocho'


class MenuName(enum.Enum):
    KOREAN = 'korean'
    CHINESE = 'chinese'
    JAPANESE = 'japanese'
    WESTERN = 'western'
    CHICKEN = 'chicken'
    PIZZA = 'pizza'
    SNACK = 'snack'
    DESSERT = 'dessert'
    COFFEE = 'coffee'
    ETC = 'etc'


class RoomStatus(enum.Enum):
    ACTIVE = 'active'
    INACTIVE = 'inactive'
