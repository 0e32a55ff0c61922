"""
Settings for the test suite.

Uses an in-memory SQLite database and fixed secrets so tests run without
a PostgreSQL server or a .env file.
"""
import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')
os.environ.setdefault('DEBUG', 'True')
os.environ.setdefault('TURNSTILE_SECRET', 'test-turnstile-secret')

from .settings import *  # noqa: E402,F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

SUBMISSION_ALLOWED_ORIGINS = DEFAULT_SUBMISSION_ALLOWED_ORIGINS  # noqa: F405
TURNSTILE_SECRET_KEY = 'test-turnstile-secret'
