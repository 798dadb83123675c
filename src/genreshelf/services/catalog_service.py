"""
Catalog Service for genreshelf
Read-only genre and book reference data, seeded on first start
"""
from genreshelf.models import Book, Genre
from genreshelf.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_COVER = 'images/book-cover.svg'

DEFAULT_GENRES = [
    {'name': 'Fiction', 'books': [
        {'title': 'The Great Gatsby', 'image_ref': DEFAULT_COVER},
        {'title': '1984', 'image_ref': DEFAULT_COVER},
    ]},
    {'name': 'Mystery', 'books': [
        {'title': 'The Da Vinci Code', 'image_ref': DEFAULT_COVER},
        {'title': 'Gone Girl', 'image_ref': DEFAULT_COVER},
    ]},
    {'name': 'Romance', 'books': [
        {'title': 'Pride and Prejudice', 'image_ref': DEFAULT_COVER},
        {'title': 'Me Before You', 'image_ref': DEFAULT_COVER},
    ]},
    {'name': 'Drama', 'books': [
        {'title': 'Death of a Salesman', 'image_ref': DEFAULT_COVER},
        {'title': 'A Streetcar Named Desire', 'image_ref': DEFAULT_COVER},
    ]},
    {'name': 'Sci-Fi', 'books': [
        {'title': 'Dune', 'image_ref': DEFAULT_COVER},
        {'title': "Ender's Game", 'image_ref': DEFAULT_COVER},
    ]},
]


class CatalogService:
    def __init__(self, config=None):
        self.config = config

    def seed_if_empty(self, genres=None):
        """Insert the reference genres only when no genre exists yet.

        Returns True when the catalog was seeded, False when existing data
        was left untouched.
        """
        if Genre.objects.count() > 0:
            logger.debug("Catalog already populated, skipping seed")
            return False

        genres = DEFAULT_GENRES if genres is None else genres
        documents = [
            Genre(name=genre['name'], books=[Book(**book) for book in genre.get('books', [])])
            for genre in genres
        ]
        if documents:
            Genre.objects.insert(documents)

        logger.info(f"Seeded catalog with {len(documents)} genres")
        return True

    def list_genres(self):
        """All genres in insertion order"""
        return list(Genre.objects.order_by('id'))

    def find_genre(self, name):
        return Genre.objects(name=name).first()
