"""
Django production settings.

Extends config/settings.py with:
- PostgreSQL via DATABASE_URL (dj-database-url)
- WhiteNoise compressed static files
- Security settings for HTTPS deployments
"""

import logging
import os
import re

import dj_database_url

from .settings import *  # noqa: F401,F403

logger = logging.getLogger(__name__)

# =============================================================================
# SECURITY SETTINGS
# =============================================================================

SECRET_KEY = os.environ.get('SECRET_KEY', 'fallback-key-for-development-only')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() in ('true', '1', 'yes')

ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', '.onrender.com,localhost,127.0.0.1').split(',')

CSRF_TRUSTED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get('CSRF_TRUSTED_ORIGINS', 'https://*.onrender.com').split(',')
    if origin.strip()
]

# =============================================================================
# DATABASE - PostgreSQL via DATABASE_URL
# =============================================================================


def clean_database_url(raw_url):
    """Strip the wrappers people paste along with the URL (psql prefix, quotes)."""
    url = (raw_url or '').strip()
    if url.startswith('psql'):
        url = url.replace('psql', '', 1).strip()
    if len(url) >= 2 and url[0] == url[-1] and url[0] in ('"', "'"):
        url = url[1:-1]
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


DATABASE_URL = clean_database_url(os.environ.get('DATABASE_URL'))

if DATABASE_URL:
    safe_db_url = re.sub(r':([^:@]+)@', ':****@', DATABASE_URL)
    try:
        DATABASES = {
            'default': dj_database_url.parse(
                DATABASE_URL,
                conn_max_age=600,
                conn_health_checks=True,
            )
        }
    except ValueError as e:
        raise ValueError(f"DATABASE_URL is not a valid database URL: {safe_db_url}") from e
else:
    logger.warning("DATABASE_URL is not set; falling back to SQLite.")

# =============================================================================
# STATIC FILES (WhiteNoise)
# =============================================================================

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage'},
}

# =============================================================================
# SECURITY HEADERS (Production)
# =============================================================================

if not DEBUG:
    SECURE_CONTENT_TYPE_NOSNIFF = True
    X_FRAME_OPTIONS = 'DENY'

    # Behind the platform's TLS-terminating proxy
    SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

    SECURE_SSL_REDIRECT = True
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True

ACCOUNT_DEFAULT_HTTP_PROTOCOL = 'https'
