import os
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), '.env'))

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-prod'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///meetup.db'

    # OAuth provider (authorization code flow)
    OAUTH_CLIENT_ID = os.environ.get('OAUTH_CLIENT_ID')
    OAUTH_CLIENT_SECRET = os.environ.get('OAUTH_CLIENT_SECRET')
    OAUTH_REDIRECT_URI = os.environ.get('OAUTH_REDIRECT_URI') or 'http://localhost:5000/login/callback'
    OAUTH_TOKEN_URL = os.environ.get('OAUTH_TOKEN_URL') or 'https://api.intra.42.fr/oauth/token'
    OAUTH_PROFILE_URL = os.environ.get('OAUTH_PROFILE_URL') or 'https://api.intra.42.fr/v2/me'
    OAUTH_TIMEOUT_SECONDS = int(os.environ.get('OAUTH_TIMEOUT_SECONDS', '10'))

    # Room rules
    ROOMS_PER_PAGE = int(os.environ.get('ROOMS_PER_PAGE', '10'))
    ROOM_DEFAULT_CAPACITY = int(os.environ['ROOM_DEFAULT_CAPACITY']) if os.environ.get('ROOM_DEFAULT_CAPACITY') else None  # None = unlimited
    ROOM_CONFLICT_WINDOW_MINUTES = int(os.environ.get('ROOM_CONFLICT_WINDOW_MINUTES', '60'))
    ROOM_SEARCH_BAN_DIRECTION = os.environ.get('ROOM_SEARCH_BAN_DIRECTION', 'issued')  # issued, received

class DevelopmentConfig(Config):
    DEBUG = True

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ROOM_DEFAULT_CAPACITY = None
    ROOM_SEARCH_BAN_DIRECTION = 'issued'

class ProductionConfig(Config):
    DEBUG = False
    # In prod, rely on env vars strictly
