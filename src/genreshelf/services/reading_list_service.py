"""
Reading List Service for genreshelf
Per-user reading list entries with optional comment and rating
"""
from bson import ObjectId
from genreshelf.errors import InvalidRating
from genreshelf.models import ReadingListEntry
from genreshelf.utils.logging import get_logger

logger = get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def parse_rating(raw):
    """Turn a submitted rating into an int, or None when left blank"""
    if raw is None or not str(raw).strip():
        return None

    try:
        rating = int(str(raw).strip())
    except ValueError:
        raise InvalidRating(raw)

    validate_rating(rating)
    return rating


def validate_rating(rating):
    if rating is None:
        return
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidRating(rating)
    if not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidRating(rating)


class ReadingListService:
    def __init__(self, config=None):
        self.config = config

    @staticmethod
    def _user_oid(user_id):
        return user_id if isinstance(user_id, ObjectId) else ObjectId(str(user_id))

    def _first_match(self, user_id, book_title):
        return ReadingListEntry.objects(
            user_id=self._user_oid(user_id), book_title=book_title
        ).order_by('id').first()

    def list_for_user(self, user_id):
        return list(ReadingListEntry.objects(user_id=self._user_oid(user_id)).order_by('id'))

    def add(self, user_id, book_title):
        """Add a book to the list.

        Inserts without checking for an existing entry, so adding the same
        title twice leaves two entries.
        """
        entry = ReadingListEntry(user_id=self._user_oid(user_id), book_title=book_title)
        entry.save(force_insert=True)
        logger.info(f"User {user_id} added '{book_title}' to reading list")
        return entry

    def remove(self, user_id, book_title):
        """Delete the first matching entry; returns False when there was none"""
        entry = self._first_match(user_id, book_title)
        if entry is None:
            logger.debug(f"Remove ignored, '{book_title}' not on list of user {user_id}")
            return False

        entry.delete()
        logger.info(f"User {user_id} removed '{book_title}' from reading list")
        return True

    def set_review(self, user_id, book_title, comment, rating):
        """Update comment and rating on the first matching entry.

        Never creates an entry. Returns False when nothing matched.
        """
        validate_rating(rating)

        entry = self._first_match(user_id, book_title)
        if entry is None:
            logger.debug(f"Review ignored, '{book_title}' not on list of user {user_id}")
            return False

        entry.update(set__comment=comment, set__rating=rating)
        logger.info(f"User {user_id} reviewed '{book_title}'")
        return True
