from flask import current_app
from app.extensions import db
from app.models import Ban, User
from app.services.exceptions import RoomError, UnknownUser
from app.utils.decorators import transactional

class UserService:

    @staticmethod
    def get_user(user_id):
        if not user_id:
            return None
        return db.session.get(User, user_id)

    @staticmethod
    def user_id_check(user_id) -> bool:
        """True if user_id is a registered user."""
        return UserService.get_user(user_id) is not None

    @staticmethod
    @transactional
    def process_new_user(user_id, email):
        """Create the user on first login; keep the stored email in sync afterwards."""
        user = UserService.get_user(user_id)
        if user is None:
            user = User(id=user_id, email=email)
            db.session.add(user)
            current_app.logger.info(f"New user registered: {user_id}")
        elif email and user.email != email:
            user.email = email
        return user

    @staticmethod
    @transactional
    def ban_user(src_id, dest_id):
        if src_id == dest_id:
            raise RoomError('A user cannot ban themselves.')
        if not UserService.user_id_check(src_id) or not UserService.user_id_check(dest_id):
            raise UnknownUser()

        ban = Ban.query.filter_by(src_id=src_id, dest_id=dest_id).first()
        if ban is None:
            ban = Ban(src_id=src_id, dest_id=dest_id)
            db.session.add(ban)
        return ban

    @staticmethod
    @transactional
    def unban_user(src_id, dest_id) -> bool:
        ban = Ban.query.filter_by(src_id=src_id, dest_id=dest_id).first()
        if ban is None:
            return False
        db.session.delete(ban)
        return True
