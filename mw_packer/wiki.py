"""
See the Wiki docstrings.
"""
import logging
from http.cookiejar import DefaultCookiePolicy
from urllib.parse import urljoin
import requests
from . import decode
from .actions import CheckToken, EditArticle, Login, Upload, encode
from .excs import ApiError, AuthError, StateError, TransportError
from .misc import Meta
from .session import SessionState

__all__ = [
    'API_URL',
    'DEFAULT_USER_AGENT',
    'Wiki',
]

logger = logging.getLogger(__name__)

API_URL = "http://wiki.bibanon.org/api.php"
DEFAULT_USER_AGENT = "mw_packer/1.0.0, python-requests"
ERROR_HEADER = 'mediawiki-api-error'

def _set_cookies(response):
    """Return every Set-Cookie header of a response, unjoined."""
    raw_headers = getattr(response.raw, 'headers', None)
    if hasattr(raw_headers, 'getlist'):
        return raw_headers.getlist('Set-Cookie')
    header = response.headers.get('Set-Cookie')
    return [header] if header else []

def _redirect_method(method, status):
    """Return the method a redirect with ``status`` is followed with.

    Same rules as requests' own redirect handling.
    """
    if status == 303 and method != 'HEAD':
        return 'GET'
    if status in (301, 302) and method == 'POST':
        return 'GET'
    return method

def _check_status(response, what):
    """Raise TransportError unless the status is 2xx or 3xx."""
    if not 200 <= response.status_code < 400:
        raise TransportError('{} returned HTTP {} {}'.format(
            what, response.status_code, response.reason or ''
        ).rstrip(), status=response.status_code)

class Wiki(object):
    """A client for one wiki's API, with its own session.

    Creating a Wiki fetches a login token, so the object is ready for
    ``login`` straight away. After a successful login it holds an edit
    token and can edit articles and upload files.

    One Wiki must not be used from several threads at once; create one
    per thread instead, each gets its own server-side session.
    """

    def __init__(self, api_url=API_URL, user_agent=None, session=None):
        """Initialize a wiki with its API URL and fetch a login token.

        If user_agent is specified, all requests will use that user agent.
        Otherwise, a generic user agent is used.
        ``session`` is an optional requests.Session to send requests with.
        Its cookie store is switched off (its cookie policy is replaced
        with one that accepts nothing): this Wiki keeps the session's
        cookies itself, in ``state``.
        """
        self.api_url = api_url
        if user_agent is not None:
            self.user_agent = user_agent
        else:
            self.user_agent = DEFAULT_USER_AGENT
        self.meta = Meta(self)
        self.state = SessionState()
        self._session = session if session is not None else requests.session()
        # cookies live in self.state only
        self._session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        self.state.set_token(self.meta.tokens('login'), 'login')

    def __repr__(self):
        """Represent a Wiki object."""
        return "<Wiki at {addr}>".format(addr=self.api_url)

    __str__ = __repr__

    @property
    def token(self):
        """The current token."""
        return self.state.token

    @property
    def logged_in(self):
        """Whether the wiki holds an edit token."""
        return self.state.can_edit

    def _send(self, method, url, **kwargs):
        """Send one HTTP request, turning requests' errors into ours."""
        headers = {"User-Agent": self.user_agent}
        headers.update(kwargs.pop('headers', {}))
        try:
            return self._session.request(method, url, headers=headers,
                                         allow_redirects=False, **kwargs)
        except requests.exceptions.RequestException as exc:
            raise TransportError('{} {} failed: {}'.format(
                method, url, exc)) from exc

    def _exchange(self, method, params=None, data=None, files=None,
                  cookie_header=None):
        """Send a request to the API, following redirects by hand.

        The Set-Cookie headers of every redirect are merged into the jar,
        and each hop after the first carries the jar as it stands then.
        ``cookie_header`` None sends no cookies at all. Returns the
        final response, whose cookies are left for the caller to merge.
        """
        url = self.api_url
        for _ in range(self._session.max_redirects + 1):
            response = self._send(method, url, params=params, data=data,
                                  files=files,
                                  headers={'Cookie': cookie_header}
                                  if cookie_header else {})
            target = self._session.get_redirect_target(response)
            if target is None:
                return response
            self.state.merge(_set_cookies(response))
            url = urljoin(response.url, target)
            method = _redirect_method(method, response.status_code)
            logger.debug('Redirected (%d) to %s %s', response.status_code,
                         method, url)
            # the target URL carries its own query string
            params = None
            if method == 'GET':
                data = files = None
            if cookie_header is not None:
                cookie_header = self.state.cookie_header()
        raise TransportError('Exceeded {} redirects'.format(
            self._session.max_redirects), status=response.status_code)

    def perform(self, action, shape=None):
        """Send one action through the preflight/request pipeline.

        Returns the result picked out by ``shape`` (see mw_packer.decode),
        or the whole Envelope if no shape is given.

        The Cookie header of the action is fixed before the preflight goes
        out, so preflight cookies are sent from the next action on (or
        from a redirect of this one, which carries the whole jar).
        Mutating actions raise StateError without an edit token.
        """
        if action.mutating and not self.state.can_edit:
            raise StateError('Cannot {} without logging in first'.format(
                action.name))
        cookie_header = self.state.cookie_header()

        logger.debug('OPTIONS %s (before %s)', self.api_url, action.name)
        response = self._exchange('OPTIONS', params={'Origin': '*'})
        self.state.merge(_set_cookies(response))
        _check_status(response, 'Preflight')

        encoded = encode(action)
        logger.debug('%s %s action=%s', encoded.method, self.api_url,
                     action.name)
        response = self._exchange(encoded.method, params=encoded.params,
                                  data=encoded.data, files=encoded.files,
                                  cookie_header=cookie_header)

        error = response.headers.get(ERROR_HEADER)
        if error is not None:
            raise ApiError.fromcode(error)

        self.state.merge(_set_cookies(response))
        _check_status(response, 'Action ' + action.name)

        return decode.decode(response.text, shape)

    def login(self, username, password):
        """Login with a username and password; fetch an edit token.

        Raises AuthError carrying the server's result if it isn't
        "Success"; the login token is kept in that case.
        """
        params = Login(lgname=username, lgpassword=password,
                       lgtoken=self.state.token)
        result = self.perform(params, decode.LOGIN_RESULT)
        if result != 'Success':
            raise AuthError(result)
        logger.info('Logged in as %s', username)
        self.state.set_token(self.meta.tokens(), 'csrf')

    def token_check(self):
        """Check the current token against the server as a csrf token.

        Returns the server's verdict, e.g. "valid" or "invalid".
        """
        return self.perform(CheckToken(self.state.token, 'csrf'),
                            decode.CHECKTOKEN_RESULT)

    def user_info(self):
        """Return the User the session is logged in as."""
        return self.meta.userinfo()

    def edit_article(self, article):
        """Write an article, flagged as a bot edit.

        Returns the ``edit`` object of the response, or None if the
        server sent none.
        """
        return self.perform(EditArticle(article, True, self.state.token),
                            decode.EDIT)

    def upload(self, filename, filepath):
        """Upload the local file at ``filepath`` as ``filename``.

        Returns the ``upload`` object of the response, or None if the
        server sent none. Raises OSError if the file can't be read.
        """
        return self.perform(Upload(filename, filepath, self.state.token),
                            decode.UPLOAD)
