"""
mw_packer.excs - Exceptions raised by the client.

Every error the client raises inherits from ``WikiError``. API errors
can be caught by their error code:

..code-block:: python

    try:
        wiki.edit_article(article)
    except mw.ApiError.protectedpage as exc:
        print('Page is protected:', exc.info)
    except mw.TransportError as exc:
        print('Could not reach the wiki:', exc)

``ApiError.<code>`` is created the first time it is accessed, so any code
the server might send can be named in an ``except`` clause.
"""

__all__ = [
    'WikiError',
    'TransportError',
    'ApiError',
    'AuthError',
    'DecodeError',
    'StateError',
    'WikiWarning',
]

class _MetaGetattr(type):
    """Metaclass to provide __getattr__ on a class."""
    def __getattr__(cls, name):
        if name.startswith('_'):
            raise AttributeError(name)
        setattr(cls, name, type(name, (cls,), {}))
        return getattr(cls, name)

class WikiError(Exception):
    """Base class for everything the client raises."""
    pass

class TransportError(WikiError):
    """The HTTP exchange itself failed.

    ``status`` is the HTTP status code, or None if no response was
    received at all.
    """
    def __init__(self, message, status=None):
        super(TransportError, self).__init__(message)
        self.status = status

class ApiError(WikiError, metaclass=_MetaGetattr):
    """The API reported an error, either in the ``mediawiki-api-error``
    header or in an ``error`` object in the body.
    """
    def __init__(self, code, info=None):
        message = code if not info else '{}: {}'.format(code, info)
        super(ApiError, self).__init__(message)
        self.code = code
        self.info = info

    @classmethod
    def fromcode(cls, code, info=None):
        """Build the exception subclass matching ``code``."""
        exc_type = getattr(cls, code, cls)
        # codes like "mro" collide with attributes of type itself
        if not (isinstance(exc_type, type) and issubclass(exc_type, cls)):
            exc_type = cls
        return exc_type(code, info)

class AuthError(WikiError):
    """Login did not succeed. ``result`` is the server's result string."""
    def __init__(self, result):
        super(AuthError, self).__init__('Error logging in: ' + str(result))
        self.result = result

class DecodeError(WikiError):
    """The response body did not have the expected shape."""
    pass

class StateError(WikiError):
    """A mutating action was attempted without an edit token."""
    pass

class WikiWarning(UserWarning, metaclass=_MetaGetattr):
    """The API sent a warning in the response."""
    pass
