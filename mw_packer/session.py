"""
mw_packer.session - The state one client carries between requests:
the cookie jar and the current token.
"""
from collections import OrderedDict

__all__ = [
    'SessionState',
    'merge_cookies',
    'unescape_token',
]

def unescape_token(token):
    """Undo the backslash escaping some wikis apply to tokens.

    Each escaped pair ``\\\\`` becomes a single backslash. A token that
    has already been unescaped passes through unchanged.
    """
    return token.replace('\\\\', '\\')

def merge_cookies(jar, headers):
    """Fold raw Set-Cookie header values into ``jar``.

    Every ``;``-separated segment of a header is stored under its name;
    segments without a value (``HttpOnly``) are stored as ``"true"``.
    Later values overwrite earlier ones.
    """
    for header in headers:
        for segment in header.split(';'):
            if not segment.strip():
                continue
            name, sep, value = segment.partition('=')
            jar[name.strip()] = value.strip() if sep else 'true'
    return jar

class SessionState(object):
    """Cookies and token for one logged-in (or not yet) session.

    Not safe to share between threads: each request mutates it.
    """
    def __init__(self):
        self.cookies = OrderedDict()
        self.token = ''
        self.token_type = None

    def __repr__(self):
        """Represent the session without leaking its secrets."""
        return '<SessionState {n} cookies, {kind} token>'.format(
            n=len(self.cookies), kind=self.token_type or 'no')

    __str__ = __repr__

    def cookie_header(self):
        """Return the value of the Cookie header for the next request."""
        return '; '.join('{}={}'.format(key, value)
                         for key, value in self.cookies.items())

    def merge(self, headers):
        """Merge the Set-Cookie headers of a response."""
        merge_cookies(self.cookies, headers)

    def set_token(self, token, kind):
        """Store a freshly fetched token of type ``kind``."""
        self.token = unescape_token(token)
        self.token_type = kind

    @property
    def can_edit(self):
        """Whether the current token is an edit (csrf) token."""
        return self.token_type == 'csrf' and bool(self.token)
