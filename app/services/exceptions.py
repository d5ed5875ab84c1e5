"""
Error kinds raised by the room services.

Every kind carries the stable negative ``code`` callers used to receive as a
sentinel return value, so both ``except TimeConflict`` and ``err.code == -2``
discriminate the failure class.
"""


class RoomError(ValueError):
    code = 0
    message = 'Room operation failed.'

    def __init__(self, message=None):
        super().__init__(message or self.message)

    def to_dict(self):
        return {
            'code': self.code,
            'error': type(self).__name__,
            'message': str(self)
        }


class InvalidTime(RoomError):
    code = -1
    message = 'Time must match yyyy-MM-dd HH:mm:ss or be "default".'


class InvalidId(RoomError):
    # Same parse-failure group as InvalidTime
    code = -1
    message = 'Identifier is not a valid integer.'


class TimeConflict(RoomError):
    code = -2
    message = 'User already takes part in a room within an hour of this time.'


class UnknownUser(RoomError):
    code = -3
    message = 'User not found.'


class InvalidEnum(RoomError):
    code = -4
    message = 'Value is not part of the allowed enumeration.'


class UnknownRoom(RoomError):
    code = -5
    message = 'Room not found.'


class NotAParticipant(RoomError):
    code = -6
    message = 'User does not take part in this room.'


class RoomClosed(RoomError):
    code = -7
    message = 'Room is not active.'


class RoomFull(RoomError):
    code = -8
    message = 'Room has reached its capacity.'


class StoreUnavailable(RoomError):
    code = -9
    message = 'Storage is unavailable, please retry later.'


class IdentityProviderError(Exception):
    """Raised when the OAuth provider cannot be reached or answers badly."""
