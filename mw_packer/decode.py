"""
mw_packer.decode - Turning response bodies into results.

Every response is JSON wrapped in the same envelope: an optional
``batchcomplete`` marker next to the action's own payload. ``parse``
unwraps the envelope and raises on body-level errors; a ``Shape`` then
picks the expected result out of the payload.
"""
import json
from warnings import warn as _warn
from .excs import ApiError, DecodeError, WikiWarning
from .page import User

__all__ = [
    'Envelope',
    'Shape',
    'parse',
    'decode',
    'LOGIN_TOKEN',
    'CSRF_TOKEN',
    'LOGIN_RESULT',
    'CHECKTOKEN_RESULT',
    'USERINFO',
    'EDIT',
    'UPLOAD',
]

class Envelope(object): #pylint: disable=too-few-public-methods
    """A decoded response: the batchcomplete marker and the payload."""
    def __init__(self, payload, batchcomplete=None):
        self.payload = payload
        self.batchcomplete = batchcomplete

    def __repr__(self):
        """Represent an envelope."""
        return '<Envelope {keys}>'.format(keys=sorted(self.payload))

    __str__ = __repr__

def _check_error(data):
    """Raise the body-level error, if there is one."""
    if 'error' not in data:
        return
    error = data['error']
    if not isinstance(error, dict):
        raise ApiError.fromcode(str(error))
    raise ApiError.fromcode(str(error.get('code', 'unknown')),
                            error.get('info'))

def _emit_warnings(data):
    """Pass API warnings on through the warnings module."""
    warnings = data.get('warnings')
    if not isinstance(warnings, dict):
        return
    for module, value in warnings.items():
        if isinstance(value, dict):
            value = value.get('*', value.get('warnings', value))
        category = getattr(WikiWarning, module, WikiWarning)
        if not (isinstance(category, type)
                and issubclass(category, WikiWarning)):
            category = WikiWarning
        _warn('warning from {} module: {}'.format(module, value), category)

def parse(text, lenient=False):
    """Parse a response body into an Envelope.

    Raises DecodeError if the body is not a JSON object, unless
    ``lenient`` is set, in which case None is returned. Raises ApiError
    if the body carries an ``error`` object.
    """
    try:
        data = json.loads(text)
    except ValueError as exc:
        if lenient:
            return None
        raise DecodeError('Response is not JSON: {!r}'.format(text[:200])) from exc
    if not isinstance(data, dict):
        if lenient:
            return None
        raise DecodeError('Response is not a JSON object: {!r}'.format(data))
    _check_error(data)
    _emit_warnings(data)
    payload = dict(data)
    batchcomplete = payload.pop('batchcomplete', None)
    payload.pop('warnings', None)
    return Envelope(payload, batchcomplete)

class Shape(object): #pylint: disable=too-few-public-methods
    """The expected result of one family of actions.

    ``path`` is the sequence of keys leading to the result inside the
    payload, ``convert`` an optional callable applied to it. A lenient
    shape returns None instead of raising when the result is missing.
    """
    def __init__(self, name, path, convert=None, lenient=False):
        self.name = name
        self.path = tuple(path)
        self.convert = convert
        self.lenient = lenient

    def __repr__(self):
        """Represent a shape."""
        return '<Shape {}>'.format(self.name)

    __str__ = __repr__

    def __call__(self, envelope):
        """Extract the result from ``envelope``."""
        data = envelope.payload
        for part in self.path:
            if not isinstance(data, dict) or part not in data:
                if self.lenient:
                    return None
                raise DecodeError('Expected {} at {} in response'.format(
                    self.name, '.'.join(self.path)))
            data = data[part]
        if self.convert is not None:
            return self.convert(data)
        return data

def _string(data):
    """Require a string result."""
    if not isinstance(data, str):
        raise DecodeError('Expected a string, got {!r}'.format(data))
    return data

LOGIN_TOKEN = Shape('login token', ('query', 'tokens', 'logintoken'), _string)
CSRF_TOKEN = Shape('csrf token', ('query', 'tokens', 'csrftoken'), _string)
LOGIN_RESULT = Shape('login result', ('login', 'result'), _string)
CHECKTOKEN_RESULT = Shape('checktoken result', ('checktoken', 'result'), _string)
USERINFO = Shape('user info', ('query', 'userinfo'), User.fromdata)
EDIT = Shape('edit acknowledgement', ('edit',), lenient=True)
UPLOAD = Shape('upload acknowledgement', ('upload',), lenient=True)

def decode(text, shape=None):
    """Parse ``text`` and extract the result described by ``shape``.

    Without a shape the whole Envelope is returned.
    """
    if shape is None:
        return parse(text)
    envelope = parse(text, lenient=shape.lenient)
    if envelope is None:
        return None
    return shape(envelope)
