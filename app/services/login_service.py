import requests
from flask import current_app
from app.services.exceptions import IdentityProviderError
from app.services.user_service import UserService

class LoginService:
    """OAuth authorization-code exchange against the identity provider."""

    @staticmethod
    def _timeout():
        return current_app.config.get('OAUTH_TIMEOUT_SECONDS', 10)

    @staticmethod
    def get_oauth_token(code):
        """Exchange an authorization code for an access token."""
        if not code:
            raise IdentityProviderError('Missing authorization code.')

        cfg = current_app.config
        try:
            response = requests.post(cfg['OAUTH_TOKEN_URL'], data={
                'grant_type': 'authorization_code',
                'client_id': cfg.get('OAUTH_CLIENT_ID'),
                'client_secret': cfg.get('OAUTH_CLIENT_SECRET'),
                'code': code,
                'redirect_uri': cfg.get('OAUTH_REDIRECT_URI')
            }, timeout=LoginService._timeout())
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            current_app.logger.warning(f"OAuth token exchange failed: {e}")
            raise IdentityProviderError(f'Token exchange failed: {e}') from e

        token = payload.get('access_token') if isinstance(payload, dict) else None
        if not token:
            raise IdentityProviderError('Provider answered without an access token.')
        return token

    @staticmethod
    def get_user_info(token):
        """Return (user_id, email) for the owner of the access token."""
        try:
            response = requests.get(
                current_app.config['OAUTH_PROFILE_URL'],
                headers={'Authorization': f'Bearer {token}'},
                timeout=LoginService._timeout()
            )
            response.raise_for_status()
            profile = response.json()
        except (requests.RequestException, ValueError) as e:
            current_app.logger.warning(f"OAuth profile fetch failed: {e}")
            raise IdentityProviderError(f'Profile fetch failed: {e}') from e

        user_id = profile.get('login') if isinstance(profile, dict) else None
        if not user_id:
            raise IdentityProviderError('Profile has no login.')
        return user_id, profile.get('email')

    @staticmethod
    def login(code):
        """Full login: code -> token -> profile -> stored user."""
        token = LoginService.get_oauth_token(code)
        user_id, email = LoginService.get_user_info(token)
        return UserService.process_new_user(user_id, email)
