"""This submodule contains the small classes."""
from . import decode
from .actions import Query, UserInfoQuery

__all__ = [
    'Meta',
]

class Meta(object):
    """A separate class for the API "meta" module."""
    def __init__(self, wiki):
        """Initialize the instance with its wiki."""
        self.wiki = wiki

    def __repr__(self):
        """Represent the Meta instance (there should only ever be one!)."""
        return '<Meta>'

    __str__ = __repr__

    def tokens(self, kind=None):
        """Fetch a token.

        ``kind`` is "login" for a login token; leave it as None for the
        server's default, a csrf (edit) token. The token is returned as
        sent, still escaped.
        """
        shape = decode.LOGIN_TOKEN if kind == 'login' else decode.CSRF_TOKEN
        return self.wiki.perform(Query('tokens', kind), shape)

    def userinfo(self, prop='rights|hasmsg'):
        """Retrieve info about the currently logged-in user as a User.

        The parameter "prop" specifies what kind of information to retrieve.
        """
        return self.wiki.perform(UserInfoQuery('userinfo', prop),
                                 decode.USERINFO)
