from app.extensions import db
from datetime import datetime

class Ban(db.Model):
    __tablename__ = 'bans'

    id = db.Column(db.Integer, primary_key=True)
    src_id = db.Column(db.String(64), db.ForeignKey('users.id'), nullable=False, index=True)
    dest_id = db.Column(db.String(64), db.ForeignKey('users.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    src = db.relationship('User', foreign_keys=[src_id], back_populates='bans_issued')
    dest = db.relationship('User', foreign_keys=[dest_id], back_populates='bans_received')

    __table_args__ = (
        db.UniqueConstraint('src_id', 'dest_id', name='uq_ban_pair'),
    )
