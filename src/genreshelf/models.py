"""
Document models for genreshelf
"""
from mongoengine import (
    Document, EmbeddedDocument, EmbeddedDocumentListField,
    IntField, ObjectIdField, StringField,
)


class User(Document):
    username = StringField(required=True, unique=True)
    password_hash = StringField(required=True)

    meta = {'collection': 'users'}

    def __repr__(self):
        return f"<User id={self.id} username={self.username!r}>"


class Book(EmbeddedDocument):
    title = StringField(required=True)
    image_ref = StringField()


class Genre(Document):
    name = StringField(required=True)
    books = EmbeddedDocumentListField(Book)

    meta = {'collection': 'genres'}


class ReadingListEntry(Document):
    """One book on one user's reading list.

    ``user_id`` holds the owning user's id by value; entries are not
    removed when a user is.
    """
    user_id = ObjectIdField(required=True)
    book_title = StringField(required=True)
    comment = StringField()
    rating = IntField(min_value=1, max_value=5)

    meta = {
        'collection': 'reading_list',
        'indexes': [('user_id', 'book_title')],
    }
