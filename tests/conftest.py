import pytest
from app import create_app, db
from app.models import User
from app.config import TestingConfig
from app.services.room_service import RoomService

@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture
def users(app):
    alice = User(id='alice', email='alice@test.com')
    bob = User(id='bob', email='bob@test.com')
    carol = User(id='carol', email='carol@test.com')
    db.session.add_all([alice, bob, carol])
    db.session.commit()
    return alice, bob, carol

@pytest.fixture
def make_room(app):
    """Create a room through the service with sensible defaults."""
    def _make_room(user_id, meet_time='2024-01-01 10:00:00', **overrides):
        request = {
            'meet_time': meet_time,
            'location': 'gaepo',
            'menus': ['korean'],
            'status': 'active',
            'title': 'Lunch'
        }
        request.update(overrides)
        return RoomService.create_room(request, user_id)
    return _make_room
