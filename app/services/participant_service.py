from app.extensions import db
from app.models import Participant, Room, RoomStatus

class ParticipantService:
    """
    Membership bookkeeping between users and rooms.

    Methods here only add/flush; committing is left to the calling
    RoomService operation so a booking is written as a whole.
    """

    @staticmethod
    def set_participate(room, user_id):
        """
        Register user_id in room.
        Idempotent: an existing membership is returned as is and nothing is written.
        """
        existing = Participant.query.filter_by(room_id=room.id, user_id=user_id).first()
        if existing:
            return existing

        participant = Participant(room=room, user_id=user_id)
        db.session.add(participant)
        db.session.flush()
        return participant

    @staticmethod
    def is_participant(room, user_id) -> bool:
        return Participant.query.filter_by(room_id=room.id, user_id=user_id).first() is not None

    @staticmethod
    def remove_participant(room, user_id) -> bool:
        participant = Participant.query.filter_by(room_id=room.id, user_id=user_id).first()
        if not participant:
            return False

        if participant in room.participants:
            room.participants.remove(participant)
        db.session.delete(participant)
        db.session.flush()
        return True

    @staticmethod
    def count(room) -> int:
        return Participant.query.filter_by(room_id=room.id).count()

    @staticmethod
    def find_active_rooms(user_id):
        """Active rooms user_id takes part in, earliest meeting first."""
        return Room.query.join(Room.participants).filter(
            Participant.user_id == user_id,
            Room.status == RoomStatus.ACTIVE
        ).order_by(*Room.ordering()).all()
