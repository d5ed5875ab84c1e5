from app.extensions import db
from app.models.enums import MenuName

class Menu(db.Model):
    __tablename__ = 'menus'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Enum(MenuName), unique=True, nullable=False)


class RoomMenu(db.Model):
    __tablename__ = 'room_menus'

    id = db.Column(db.Integer, primary_key=True)
    room_id = db.Column(db.Integer, db.ForeignKey('rooms.id'), nullable=False, index=True)
    menu_id = db.Column(db.Integer, db.ForeignKey('menus.id'), nullable=False)

    room = db.relationship('Room', back_populates='room_menus')
    menu = db.relationship('Menu', lazy='joined')

    __table_args__ = (
        db.UniqueConstraint('room_id', 'menu_id', name='uq_room_menu'),
    )
