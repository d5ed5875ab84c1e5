from datetime import timedelta
from flask import current_app
from app.extensions import db
from app.models import Ban, Location, Menu, MenuName, Room, RoomMenu, RoomStatus, User
from app.services.exceptions import (
    InvalidEnum, NotAParticipant, RoomClosed, RoomFull, TimeConflict, UnknownRoom, UnknownUser
)
from app.services.participant_service import ParticipantService
from app.utils.decorators import transactional
from app.utils.validators import (
    DEFAULT, find_enum_insensitive, is_default, is_in_enum, is_valid_time,
    parse_page, parse_room_id, parse_time, split_names
)

class RoomService:
    """
    Room booking engine.

    Every public call is one transaction (see ``transactional``). Failures are
    raised as RoomError subclasses; each carries the legacy negative ``code``.
    """

    # --- helpers -----------------------------------------------------------

    @staticmethod
    def _conflict_window():
        return timedelta(minutes=current_app.config.get('ROOM_CONFLICT_WINDOW_MINUTES', 60))

    @staticmethod
    def _lock_user(user_id):
        """Load the user row FOR UPDATE so bookings of one user run one after another."""
        if not user_id:
            return None
        return db.session.get(User, user_id, with_for_update=True)

    @staticmethod
    def _check_conflict(user_id, meet_time):
        """Raise TimeConflict if meet_time is too close to one of the user's active rooms."""
        if meet_time is None:
            return

        gap = RoomService._conflict_window()
        for room in ParticipantService.find_active_rooms(user_id):
            if room.meet_time is None:
                continue
            if not is_valid_time(room.meet_time, meet_time, gap):
                current_app.logger.warning(
                    f"Time conflict for {user_id}: room {room.id} at {room.meet_time} vs {meet_time}"
                )
                raise TimeConflict(f'Already booked in room {room.id} at {room.meet_time}.')

    @staticmethod
    def _parse_capacity(value):
        if value is None or value == '' or is_default(value):
            return current_app.config.get('ROOM_DEFAULT_CAPACITY')
        try:
            capacity = int(value)
        except (TypeError, ValueError):
            raise InvalidEnum(f'Invalid capacity: {value!r}')
        if isinstance(value, bool) or capacity < 1:
            raise InvalidEnum(f'Invalid capacity: {value!r}')
        return capacity

    @staticmethod
    def _get_or_create_menu(name):
        menu = Menu.query.filter_by(name=name).first()
        if menu is None:
            menu = Menu(name=name)
            db.session.add(menu)
            db.session.flush()
        return menu

    @staticmethod
    def _menu_filter(menu):
        """None means no menu restriction."""
        if is_default(menu) or menu is None:
            return None
        return [find_enum_insensitive(MenuName, name) for name in split_names(menu)]

    @staticmethod
    def _banned_user_ids(user_id):
        # "issued": hide rooms holding someone the requester banned.
        # "received": hide rooms holding someone who banned the requester.
        if current_app.config.get('ROOM_SEARCH_BAN_DIRECTION', 'issued') == 'received':
            rows = Ban.query.filter_by(dest_id=user_id).all()
            return {b.src_id for b in rows}
        rows = Ban.query.filter_by(src_id=user_id).all()
        return {b.dest_id for b in rows}

    @staticmethod
    def _is_excluded_room(room, banned_ids):
        return any(p.user_id in banned_ids for p in room.participants)

    @staticmethod
    def _find_room(room_id, lock=False):
        room = db.session.get(Room, parse_room_id(room_id), with_for_update=lock or None)
        if room is None:
            raise UnknownRoom(f'Room {room_id} not found.')
        return room

    # --- operations --------------------------------------------------------

    @staticmethod
    def params_check(location=DEFAULT, menu=DEFAULT, start_time=DEFAULT, end_time=DEFAULT):
        """Validate search filters. Returns None, raises InvalidEnum / InvalidTime."""
        if not is_in_enum(Location, location):
            raise InvalidEnum(f'{location!r} is not a valid Location')
        if menu is not None and not is_default(menu):
            names = split_names(menu)
            if not names:
                raise InvalidEnum(f'{menu!r} names no menu')
            for name in names:
                if not is_in_enum(MenuName, name):
                    raise InvalidEnum(f'{name!r} is not a valid MenuName')
        parse_time(start_time)
        parse_time(end_time)

    @staticmethod
    @transactional
    def create_room(request, user_id):
        """
        Create a room owned by user_id and join the owner to it.

        request keys: meet_time, location, menus, status, title, capacity.
        Checks run in order: time format, user, location, menus, status and
        capacity, then the one-hour overlap with the user's active rooms.
        """
        meet_time = parse_time(request.get('meet_time'))

        user = RoomService._lock_user(user_id)
        if user is None:
            raise UnknownUser(f'User {user_id!r} not found.')

        location = request.get('location', DEFAULT)
        location = None if is_default(location) else find_enum_insensitive(Location, location)

        menus = []
        for name in split_names(request.get('menus')):
            menu = find_enum_insensitive(MenuName, name)
            if menu not in menus:
                menus.append(menu)

        status = request.get('status')
        status = RoomStatus.ACTIVE if status is None or is_default(status) else find_enum_insensitive(RoomStatus, status)
        capacity = RoomService._parse_capacity(request.get('capacity'))

        RoomService._check_conflict(user.id, meet_time)

        room = Room(
            title=request.get('title'),
            owner=user,
            meet_time=meet_time,
            location=location,
            status=status,
            capacity=capacity
        )
        db.session.add(room)
        db.session.flush()

        for name in menus:
            db.session.add(RoomMenu(room=room, menu=RoomService._get_or_create_menu(name)))

        ParticipantService.set_participate(room, user.id)
        current_app.logger.info(f"Room {room.id} created by {user.id} for {meet_time}")
        return room.id

    @staticmethod
    @transactional
    def search_my_rooms(user_id):
        """Views of the active rooms user_id takes part in; [] when there are none."""
        return [room.to_dict() for room in ParticipantService.find_active_rooms(user_id)]

    @staticmethod
    @transactional
    def search_rooms(user_id, location=DEFAULT, menu=DEFAULT, start_time=DEFAULT, end_time=DEFAULT,
                     keyword=DEFAULT, page=1, per_page=None):
        RoomService.params_check(location, menu, start_time, end_time)

        query = Room.query.filter(Room.status == RoomStatus.ACTIVE)

        if not is_default(location):
            query = query.filter(Room.location == find_enum_insensitive(Location, location))

        if keyword and not is_default(keyword):
            query = query.filter(Room.title.icontains(keyword, autoescape=True))

        menu_names = RoomService._menu_filter(menu)
        if menu_names is not None:
            query = query.filter(Room.room_menus.any(RoomMenu.menu.has(Menu.name.in_(menu_names))))

        # A single "default" bound drops the whole time window
        if not (is_default(start_time) or is_default(end_time)):
            query = query.filter(
                Room.meet_time >= parse_time(start_time),
                Room.meet_time <= parse_time(end_time)
            )

        page = parse_page(page)
        per_page = parse_page(per_page or current_app.config.get('ROOMS_PER_PAGE', 10))
        pagination = query.order_by(*Room.ordering()).paginate(
            page=page, per_page=per_page, error_out=False
        )

        banned_ids = RoomService._banned_user_ids(user_id)
        return [room.to_dict() for room in pagination.items
                if not RoomService._is_excluded_room(room, banned_ids)]

    @staticmethod
    @transactional
    def enter_room(user_id, room_id):
        room = RoomService._find_room(room_id, lock=True)

        user = RoomService._lock_user(user_id)
        if user is None:
            raise UnknownUser(f'User {user_id!r} not found.')

        if ParticipantService.is_participant(room, user.id):
            return room.id

        if not room.is_active:
            current_app.logger.warning(f"{user.id} tried to enter closed room {room.id}")
            raise RoomClosed(f'Room {room.id} is {room.status.value}.')

        if room.capacity is not None and ParticipantService.count(room) >= room.capacity:
            current_app.logger.warning(f"{user.id} tried to enter full room {room.id}")
            raise RoomFull(f'Room {room.id} holds {room.capacity} participants.')

        RoomService._check_conflict(user.id, room.meet_time)

        ParticipantService.set_participate(room, user.id)
        current_app.logger.info(f"{user.id} entered room {room.id}")
        return room.id

    @staticmethod
    @transactional
    def exit_room(user_id, room_id):
        """
        Remove user_id from the room.
        The owner's seat passes to the earliest remaining participant; the last
        one out closes the room.
        """
        room = RoomService._find_room(room_id, lock=True)

        if not ParticipantService.remove_participant(room, user_id):
            raise NotAParticipant(f'{user_id!r} is not in room {room.id}.')

        remaining = list(room.participants)
        if not remaining:
            room.status = RoomStatus.INACTIVE
            current_app.logger.info(f"Room {room.id} closed, last participant {user_id} left")
        elif room.owner_id == user_id:
            room.owner = remaining[0].user
            current_app.logger.info(f"Room {room.id} handed over from {user_id} to {room.owner.id}")
        else:
            current_app.logger.info(f"{user_id} left room {room.id}")

        return room.id
