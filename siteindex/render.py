#!/usr/bin/env python3

"""
Render listing pages from the packaged jinja2 templates.

Templates are rendered without jinja2's autoescaping: every interpolated
value goes through one of the filters below. Text uses `esc`, which
writes '&quot;' and '&#39;' for quotes. Hrefs are percent-encoded already and
use `escattr`, which only escapes '&' and '"', so an encoded "it's.html"
keeps its literal apostrophe.
"""

import os
import datetime
import collections
import urllib.parse

import jinja2

from . import PKG_DIR

# characters encodeURIComponent() leaves alone, on top of quote()'s own
SEGMENT_SAFE = "!~*'()"

HTML_ESCAPES = [
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#39;'),
]

Page = collections.namedtuple(
    'Page', ['title', 'generated_at', 'links', 'back_links', 'empty'])


def escape_html(s):
    s = str(s)
    # '&' must go first
    for char, entity in HTML_ESCAPES:
        s = s.replace(char, entity)
    return s


def escape_attr(s):
    "Escapes a double-quoted attribute value"
    return str(s).replace('&', '&amp;').replace('"', '&quot;')


def quote_segment(name):
    "Percent-encodes a single URL path segment"
    return urllib.parse.quote(name, safe=SEGMENT_SAFE)


def now_iso():
    "Current UTC time, e.g. 2024-05-01T12:00:00.000Z"
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + \
        '%03dZ' % (now.microsecond // 1000)


_env = None


def _get_env():
    global _env
    if _env is None:
        _env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(os.path.join(PKG_DIR, 'templates')),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined)
        _env.filters['esc'] = escape_html
        _env.filters['escattr'] = escape_attr
    return _env


def _fragments():
    return _get_env().get_template('fragments.j2').module


def render_links(links):
    return str(_fragments().links(list(links)))


def render_no_files(where):
    return str(_fragments().no_files(where))


def render_no_subdirs(where):
    return str(_fragments().no_subdirs(where))


def render_back_links(back_links):
    return str(_fragments().back_links(list(back_links)))


def render_page(title, generated_at, body_html, back_links_html):
    "Wraps the given fragments in the common page shell"
    tpl = _get_env().get_template('page.j2')
    return tpl.render(title=title, generated_at=generated_at,
                      body=body_html, back_links=back_links_html)


def render(page):
    "Renders a Page; page.empty is the fragment used when there are no links"
    if page.links:
        body_html = render_links(page.links)
    else:
        body_html = page.empty
    return render_page(page.title, page.generated_at, body_html,
                       render_back_links(page.back_links))
