from app.extensions import db
from datetime import datetime

class User(db.Model):
    __tablename__ = 'users'

    # Opaque identifier handed out by the OAuth provider (intra login)
    id = db.Column(db.String(64), primary_key=True)
    email = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    bans_issued = db.relationship('Ban', foreign_keys='Ban.src_id', back_populates='src', lazy=True)
    bans_received = db.relationship('Ban', foreign_keys='Ban.dest_id', back_populates='dest', lazy=True)
    participations = db.relationship('Participant', back_populates='user', lazy=True)

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email
        }
