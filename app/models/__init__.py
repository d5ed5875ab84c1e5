from app.models.enums import Location, MenuName, RoomStatus
from app.models.user import User
from app.models.ban import Ban
from app.models.menu import Menu, RoomMenu
from app.models.room import Room
from app.models.participant import Participant
