from app.extensions import db
from datetime import datetime

class Participant(db.Model):
    __tablename__ = 'participants'

    id = db.Column(db.Integer, primary_key=True)
    room_id = db.Column(db.Integer, db.ForeignKey('rooms.id'), nullable=False, index=True)
    user_id = db.Column(db.String(64), db.ForeignKey('users.id'), nullable=False, index=True)
    joined_at = db.Column(db.DateTime, default=datetime.utcnow)

    room = db.relationship('Room', back_populates='participants')
    user = db.relationship('User', back_populates='participations')

    __table_args__ = (
        # One membership row per (room, user)
        db.UniqueConstraint('room_id', 'user_id', name='uq_participant_room_user'),
    )
