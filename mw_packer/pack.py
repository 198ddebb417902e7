"""
mw_packer.pack - Publishing a packed article: an index page plus its
sections as subpages.

The caller converts the source files to wikitext first, then hands the
texts over together with a logged-in Wiki:

.. code-block:: python

    wiki = mw.Wiki()
    wiki.login(username, password)
    mw.publish(wiki, 'Some Guide', 'Update from source',
               index_text, [('Setup', setup_text), ('Setup/Linux', linux_text)])
"""
import logging
from .page import Article

__all__ = [
    'section_title',
    'publish',
]

logger = logging.getLogger(__name__)

def section_title(title, section):
    """Return the title of ``section`` as a subpage of ``title``."""
    return '{}/{}'.format(title, section)

def publish(wiki, title, summary, index, sections=()):
    """Write the index article and every (name, text) section.

    Stops at the first failure; the error propagates and the pages
    already written stay written. Returns the list of titles written.
    """
    written = []
    logger.info('Uploading index...')
    wiki.edit_article(Article(title, index, summary))
    written.append(title)

    for name, text in sections:
        logger.info('Uploading %s...', name)
        page_title = section_title(title, name)
        wiki.edit_article(Article(page_title, text, summary))
        written.append(page_title)

    logger.info('Packed & published %s (%d pages)', title, len(written))
    return written
