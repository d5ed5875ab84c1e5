from app.extensions import db
from app.models.enums import Location, RoomStatus
from app.utils.validators import TIME_FORMAT
from datetime import datetime

class Room(db.Model):
    __tablename__ = 'rooms'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(128))
    owner_id = db.Column(db.String(64), db.ForeignKey('users.id'), nullable=False, index=True)

    # Null when created with the "default" time sentinel; never updated afterwards
    meet_time = db.Column(db.DateTime, nullable=True, index=True)
    location = db.Column(db.Enum(Location), nullable=True)
    status = db.Column(db.Enum(RoomStatus), nullable=False, default=RoomStatus.ACTIVE, index=True)
    capacity = db.Column(db.Integer, nullable=True)  # None = unlimited

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    owner = db.relationship('User', foreign_keys=[owner_id])
    room_menus = db.relationship('RoomMenu', back_populates='room', cascade='all, delete-orphan',
                                 order_by='RoomMenu.id', lazy=True)
    participants = db.relationship('Participant', back_populates='room', cascade='all, delete-orphan',
                                   order_by='Participant.id', lazy=True)

    @property
    def is_active(self):
        return self.status == RoomStatus.ACTIVE

    @property
    def menu_names(self):
        return [rm.menu.name.value for rm in self.room_menus]

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'meet_time': self.meet_time.strftime(TIME_FORMAT) if self.meet_time else None,
            'location': self.location.value if self.location else None,
            'status': self.status.value,
            'capacity': self.capacity,
            'menus': self.menu_names,
            'owner': self.owner.to_dict() if self.owner else None,
            'participants': [p.user.to_dict() for p in self.participants]
        }

    @staticmethod
    def ordering():
        """Deterministic listing order: meeting time ascending, untimed rooms last, then id."""
        return (Room.meet_time.is_(None), Room.meet_time.asc(), Room.id.asc())
