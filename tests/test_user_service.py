import pytest
from app.models import Ban
from app.services.exceptions import RoomError, UnknownUser
from app.services.user_service import UserService

def test_user_id_check(app, users):
    assert UserService.user_id_check('alice') is True
    assert UserService.user_id_check('nobody') is False
    assert UserService.user_id_check(None) is False

def test_ban_user_is_idempotent(app, users):
    first = UserService.ban_user('alice', 'bob')
    second = UserService.ban_user('alice', 'bob')
    assert first.id == second.id
    assert Ban.query.count() == 1

def test_ban_validation(app, users):
    with pytest.raises(RoomError):
        UserService.ban_user('alice', 'alice')
    with pytest.raises(UnknownUser):
        UserService.ban_user('alice', 'nobody')
    assert Ban.query.count() == 0

def test_unban_user(app, users):
    UserService.ban_user('alice', 'bob')
    assert UserService.unban_user('alice', 'bob') is True
    assert UserService.unban_user('alice', 'bob') is False
