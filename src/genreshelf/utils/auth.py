"""
Session authentication for genreshelf
Signed session tokens carried in an http-only cookie
"""
from datetime import datetime, timedelta, timezone
from bson import ObjectId
from functools import wraps
from flask import current_app, g, redirect, request, url_for
from jose import JWTError, jwt
from genreshelf.services.user_service import UserService
from genreshelf.utils.logging import get_logger

logger = get_logger(__name__)

SESSION_COOKIE = 'token'
ALGORITHM = 'HS256'


def issue_token(user_id, secret, ttl_hours=0):
    """Sign a session token for a user; no expiry unless ttl_hours > 0"""
    payload = {'userId': str(user_id)}
    if ttl_hours and ttl_hours > 0:
        payload['exp'] = datetime.now(timezone.utc) + timedelta(hours=ttl_hours)
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def read_token(token, secret):
    """Return the user id from a valid token, None for anything else"""
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.debug(f"Rejected session token: {e}")
        return None

    user_id = payload.get('userId')
    if not isinstance(user_id, str) or not ObjectId.is_valid(user_id):
        logger.debug("Rejected session token without a usable userId claim")
        return None
    return user_id


def set_session_cookie(response, token):
    response.set_cookie(SESSION_COOKIE, token, httponly=True, samesite='Lax')
    return response


def clear_session_cookie(response):
    response.delete_cookie(SESSION_COOKIE, httponly=True, samesite='Lax')
    return response


def login_required(f):
    """Decorator to require a valid session token for an endpoint.

    Missing or invalid tokens redirect to the login page without saying why.
    Tokens naming a user that no longer exists count as invalid. On success
    the user id and user are available as ``g.user_id`` and ``g.user``.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = request.cookies.get(SESSION_COOKIE)
        if not token:
            return redirect(url_for('auth.login'))

        config = current_app.config['GENRESHELF_CONFIG']
        user_id = read_token(token, config.SECRET_KEY)
        if user_id is None:
            return redirect(url_for('auth.login'))

        user = UserService(config).get_user(user_id)
        if user is None:
            logger.debug(f"Session token names unknown user {user_id}")
            return redirect(url_for('auth.login'))

        g.user_id = user_id
        g.user = user
        return f(*args, **kwargs)
    return decorated_function
