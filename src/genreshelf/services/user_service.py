"""
User Service for genreshelf
Account creation and credential checks
"""
import bcrypt
from bson import ObjectId
from bson.errors import InvalidId
from mongoengine.errors import NotUniqueError
from genreshelf.errors import DuplicateUsername
from genreshelf.models import User
from genreshelf.utils.logging import get_logger

logger = get_logger(__name__)

BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72

# Checked against when the username is unknown so both failure paths do the same work
_DUMMY_HASH = bcrypt.hashpw(b'genreshelf-dummy-password', bcrypt.gensalt(rounds=BCRYPT_ROUNDS))


def _password_bytes(password):
    return (password or '').encode('utf-8')[:BCRYPT_MAX_BYTES]


def hash_password(password):
    """Hash a plaintext password with a fresh salt"""
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode('utf-8')


def check_password(password, password_hash):
    """Compare a plaintext password to a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode('utf-8'))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


class UserService:
    def __init__(self, config=None):
        self.config = config

    def create_user(self, username, password):
        """Create a user; raises DuplicateUsername if the name is taken"""
        user = User(username=username, password_hash=hash_password(password))
        try:
            user.save(force_insert=True)
        except NotUniqueError:
            logger.info(f"Signup rejected, username already taken: {username}")
            raise DuplicateUsername(username)

        logger.info(f"Created user {username}")
        return user

    def verify_credentials(self, username, password):
        """Return the matching user, or None for unknown user or wrong password"""
        user = User.objects(username=username).first()
        if user is None:
            bcrypt.checkpw(_password_bytes(password), _DUMMY_HASH)
            return None

        if not check_password(password, user.password_hash):
            return None

        return user

    def get_user(self, user_id):
        """Look up a user by id, None if missing or the id is malformed"""
        try:
            return User.objects(id=ObjectId(str(user_id))).first()
        except InvalidId:
            return None
