import unittest
from unittest.mock import patch, MagicMock
import requests
from app import create_app, db
from app.config import TestingConfig
from app.models import User
from app.services.exceptions import IdentityProviderError
from app.services.login_service import LoginService

def _response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response

class TestLoginService(unittest.TestCase):
    def setUp(self):
        self.app = create_app(TestingConfig)
        self.app.config['OAUTH_CLIENT_ID'] = 'client-id'
        self.app.config['OAUTH_CLIENT_SECRET'] = 'client-secret'
        self.app_context = self.app.app_context()
        self.app_context.push()
        db.create_all()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.app_context.pop()

    @patch('app.services.login_service.requests.get')
    @patch('app.services.login_service.requests.post')
    def test_login_creates_user(self, mock_post, mock_get):
        mock_post.return_value = _response({'access_token': 'tok-123', 'token_type': 'bearer'})
        mock_get.return_value = _response({'login': 'jdoe', 'email': 'jdoe@student.42.fr'})

        user = LoginService.login('auth-code')

        self.assertEqual(user.id, 'jdoe')
        self.assertEqual(db.session.get(User, 'jdoe').email, 'jdoe@student.42.fr')

        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], self.app.config['OAUTH_TOKEN_URL'])
        self.assertEqual(kwargs['data']['grant_type'], 'authorization_code')
        self.assertEqual(kwargs['data']['code'], 'auth-code')
        self.assertEqual(kwargs['data']['client_id'], 'client-id')
        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs['headers'], {'Authorization': 'Bearer tok-123'})

    @patch('app.services.login_service.requests.get')
    @patch('app.services.login_service.requests.post')
    def test_second_login_updates_email(self, mock_post, mock_get):
        db.session.add(User(id='jdoe', email='old@example.com'))
        db.session.commit()
        mock_post.return_value = _response({'access_token': 'tok'})
        mock_get.return_value = _response({'login': 'jdoe', 'email': 'new@example.com'})

        LoginService.login('code')

        self.assertEqual(User.query.count(), 1)
        self.assertEqual(db.session.get(User, 'jdoe').email, 'new@example.com')

    def test_missing_code(self):
        with self.assertRaises(IdentityProviderError):
            LoginService.get_oauth_token('')

    @patch('app.services.login_service.requests.post')
    def test_token_exchange_http_error(self, mock_post):
        response = _response({})
        response.raise_for_status.side_effect = requests.HTTPError('401 Client Error')
        mock_post.return_value = response

        with self.assertRaises(IdentityProviderError):
            LoginService.get_oauth_token('bad-code')

    @patch('app.services.login_service.requests.post')
    def test_token_exchange_network_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError('unreachable')
        with self.assertRaises(IdentityProviderError):
            LoginService.login('code')
        self.assertEqual(User.query.count(), 0)

    @patch('app.services.login_service.requests.post')
    def test_token_missing_in_answer(self, mock_post):
        mock_post.return_value = _response({'error': 'invalid_grant'})
        with self.assertRaises(IdentityProviderError):
            LoginService.get_oauth_token('code')

    @patch('app.services.login_service.requests.get')
    def test_profile_without_login(self, mock_get):
        mock_get.return_value = _response({'email': 'x@example.com'})
        with self.assertRaises(IdentityProviderError):
            LoginService.get_user_info('tok')

if __name__ == '__main__':
    unittest.main()
