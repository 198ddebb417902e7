"""
mw_packer.actions - The server actions the client knows how to send,
and how each one is put on the wire.

Each action is an immutable tuple. ``encode`` turns one into the method,
query parameters, form data and files for a single HTTP request:

* queries are GET requests with the parameters in the query string
* login, checktoken and edit are form-encoded POST requests
* upload is a multipart POST request carrying the file's bytes,
  with format=json as a field of its own

Nothing here checks whether an action makes sense; that is the caller's
business.
"""
from collections import namedtuple
import os

__all__ = [
    'Query',
    'UserInfoQuery',
    'CheckToken',
    'Login',
    'EditArticle',
    'Upload',
    'Encoded',
    'encode',
]

Encoded = namedtuple('Encoded', 'method params data files')

class Query(namedtuple('Query', 'meta type', defaults=(None,))):
    """action=query with a meta module, e.g. meta=tokens."""
    __slots__ = ()
    name = 'query'
    mutating = False

class UserInfoQuery(namedtuple('UserInfoQuery', 'meta uiprop')):
    """action=query&meta=userinfo with the properties to fetch."""
    __slots__ = ()
    name = 'query'
    mutating = False

class CheckToken(namedtuple('CheckToken', 'token type')):
    """action=checktoken"""
    __slots__ = ()
    name = 'checktoken'
    mutating = False

class Login(namedtuple('Login', 'lgname lgpassword lgtoken')):
    """action=login"""
    __slots__ = ()
    name = 'login'
    mutating = False

    def __repr__(self):
        return 'Login(lgname={!r}, lgpassword=***, lgtoken=***)'.format(
            self.lgname)

class EditArticle(namedtuple('EditArticle', 'article bot token')):
    """action=edit for a whole Article."""
    __slots__ = ()
    name = 'edit'
    mutating = True

class Upload(namedtuple('Upload', 'filename filepath token')):
    """action=upload of a local file under ``filename``."""
    __slots__ = ()
    name = 'upload'
    mutating = True

def _wire(value):
    """Put a value into the form the API expects."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value

def _params(action):
    """Return the API parameters for an action, format=json included.

    ``None`` values are left in; requests drops them when encoding.
    """
    if isinstance(action, EditArticle):
        fields = {
            'title': action.article.title,
            'text': action.article.text,
            'summary': action.article.summary,
            'bot': action.bot,
            'token': action.token,
        }
    else:
        fields = action._asdict()
    params = {'action': action.name}
    params.update((key, _wire(value)) for key, value in fields.items())
    params['format'] = 'json'
    return params

def encode(action):
    """Map an action to the shape of the HTTP request that carries it.

    Raises OSError if an upload's file can't be read.
    """
    if isinstance(action, (Query, UserInfoQuery)):
        return Encoded('GET', _params(action), None, None)
    if isinstance(action, Upload):
        with open(action.filepath, 'rb') as fileobj:
            content = fileobj.read()
        data = {
            'action': action.name,
            'filename': action.filename,
            'token': action.token,
            'format': 'json',
        }
        files = {'file': (os.path.basename(action.filepath), content)}
        return Encoded('POST', None, data, files)
    return Encoded('POST', None, _params(action), None)
