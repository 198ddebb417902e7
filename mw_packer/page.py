"""
This submodule contains the Article and User objects.
"""
from .excs import DecodeError

__all__ = [
    'Article',
    'User',
]

class Article(object):
    """An article to be written to the wiki.

    ``title`` is the full page title, ``text`` the wikitext body and
    ``summary`` the edit summary.
    """
    __slots__ = ('title', 'text', 'summary')

    def __init__(self, title, text, summary=''):
        """Initialize an article with its title, text and summary."""
        self.title = title
        self.text = text
        self.summary = summary

    def __repr__(self):
        """Represent an article."""
        return "<Article {name}>".format(name=self.title)

    __str__ = __repr__

    def __eq__(self, other):
        """Check if two articles are the same."""
        if not isinstance(other, Article):
            return NotImplemented
        return (self.title, self.text, self.summary) \
            == (other.title, other.text, other.summary)

    def __hash__(self):
        """Article.__hash__() <==> hash(Article)"""
        return hash((self.title, self.text, self.summary))

class User(object):
    """The currently logged-in user, as reported by the userinfo query.

    ``rights`` is a frozenset of capability strings.
    """
    def __init__(self, id, name, rights=(), has_messages=False): #pylint: disable=redefined-builtin
        self.id = id
        self.name = name
        self.rights = frozenset(rights)
        self.has_messages = has_messages

    @classmethod
    def fromdata(cls, data):
        """Build a User from the ``userinfo`` object of a query result."""
        try:
            userid = data['id']
            name = data['name']
            rights = data.get('rights', [])
        except (KeyError, TypeError, AttributeError) as exc:
            raise DecodeError('Malformed userinfo: {!r}'.format(data)) from exc
        if not isinstance(userid, int) or isinstance(userid, bool) \
                or not isinstance(name, str) \
                or not isinstance(rights, list) \
                or not all(isinstance(right, str) for right in rights):
            raise DecodeError('Malformed userinfo: {!r}'.format(data))
        # hasmsg adds a "messages" key only when there are new messages
        return cls(userid, name, rights, has_messages='messages' in data)

    def __repr__(self):
        """Represent a user."""
        return "<User {name}>".format(name=self.name)

    __str__ = __repr__

    def __eq__(self, other):
        """Check if two users are the same."""
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id and self.name == other.name

    def __hash__(self):
        """User.__hash__() <==> hash(User)"""
        return hash((self.id, self.name))

    def can(self, right):
        """Return whether the user has ``right``."""
        return right in self.rights
