"""
A small, stateful MediaWiki API client for publishing articles.

Handles the parts of the API a publishing bot needs: login tokens,
logging in, csrf tokens, user info, editing articles and uploading
files. Every call is preceded by a CORS preflight and carries the
session's cookies, which the client tracks itself.

Requires the ``requests`` library.

http://www.mediawiki.org/

Installation
============

To install the latest development version::

    pip install -e .

To run the tests::

    pip install -e .[test]
    pytest

Example Usage
=============

.. code-block:: python

    import mw_packer as mw

Log in:

.. code-block:: python

    wiki = mw.Wiki("http://wiki.bibanon.org/api.php", "MyCoolBot/0.0.0")

    wiki.login("Username", password)

    print(wiki.user_info().rights)

Edit an article:

.. code-block:: python

    wiki.edit_article(mw.Article("Some Guide", "Hello, '''world'''!",
                                 "Made a test edit"))

Publish an index page and its sections:

.. code-block:: python

    mw.publish(wiki, "Some Guide", "Update", index_text,
               [("Setup", setup_text)])

Upload a file:

.. code-block:: python

    wiki.upload("Some_Guide_thumb.jpg", "thumb.jpg")

Catch errors:

.. code-block:: python

    try:
        wiki.login("Username", "wrong password")
    except mw.AuthError as exc:
        print("Login failed:", exc.result)
    except mw.ApiError.badtoken:
        print("Stale token")

MIT Licensed.
"""

__version__ = '1.0.0'

from .excs import (WikiError, TransportError, ApiError, AuthError,
                   DecodeError, StateError, WikiWarning)
from .page import Article, User
from .session import SessionState, merge_cookies, unescape_token
from .wiki import Wiki, API_URL
from .pack import publish, section_title

__all__ = [
    'WikiError',
    'TransportError',
    'ApiError',
    'AuthError',
    'DecodeError',
    'StateError',
    'WikiWarning',
    'Article',
    'User',
    'SessionState',
    'merge_cookies',
    'unescape_token',
    'Wiki',
    'API_URL',
    'publish',
    'section_title',
]
