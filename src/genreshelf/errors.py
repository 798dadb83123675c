"""
Exceptions raised by genreshelf services
"""


class GenreshelfError(Exception):
    """Base class for application errors"""


class ConfigurationError(GenreshelfError):
    """A required setting is missing or malformed"""


class DuplicateUsername(GenreshelfError):
    """Signup attempted with a username that is already taken"""

    def __init__(self, username):
        super().__init__(f"User already exists: {username}")
        self.username = username


class InvalidRating(GenreshelfError):
    """Rating is not an integer between 1 and 5"""

    def __init__(self, value):
        super().__init__(f"Rating must be a whole number from 1 to 5, got {value!r}")
        self.value = value
