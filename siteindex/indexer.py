#!/usr/bin/env python3

# MIT License
#
# Copyright (c) 2016 Jonathan Lebon
# Copyright (c) 2026 The siteindex authors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Create index.html file listings for the subdirectories of a content
directory, and for flat directories of HTML pages.
"""

import logging

from os.path import join

from . import render
from . import scanner
from . import utils
from .render import Page

logger = logging.getLogger("siteindex")

INDEX_FILE = 'index.html'
SITE_ROOT_LABEL = 'Back to site root'


def _write_page(site_root, dirpath, page):
    "Renders page into dirpath/index.html and reports it"
    out = join(dirpath, INDEX_FILE)
    utils.write_file(out, render.render(page))
    print("Wrote %s with %d links." % (utils.relpath(out, site_root),
                                       len(page.links)))
    return out


def create_subdir_index(site_root, content_dir, name, now):
    "Lists the HTML pages of content_dir/name"

    dirpath = join(site_root, content_dir, name)
    logger.debug("indexing %s" % dirpath)
    files = scanner.list_html_files(dirpath)
    where = "%s/%s/" % (content_dir, name)

    page = Page(
        title=where,
        generated_at=now,
        links=[(f, "./" + render.quote_segment(f)) for f in files],
        back_links=[("Back to %s/" % content_dir, "../"),
                    (SITE_ROOT_LABEL, "../../")],
        empty=render.render_no_files(where))
    return _write_page(site_root, dirpath, page)


def create_top_index(site_root, content_dir, subdirs, now):
    "Lists every subdirectory of content_dir, empty ones included"

    where = "%s/" % content_dir
    page = Page(
        title=where,
        generated_at=now,
        links=[(d + "/", "./" + render.quote_segment(d) + "/")
               for d in subdirs],
        back_links=[(SITE_ROOT_LABEL, "../")],
        empty=render.render_no_subdirs(where))
    return _write_page(site_root, join(site_root, content_dir), page)


def run(site_root, content_dir='webapps', now=None):
    "Indexes every subdirectory of content_dir, then content_dir itself"

    if now is None:
        now = render.now_iso()

    root = join(site_root, content_dir)
    scanner.check_dir(root)

    subdirs = scanner.list_immediate_subdirs(root)
    written = []
    for name in subdirs:
        written.append(create_subdir_index(site_root, content_dir, name, now))
    written.append(create_top_index(site_root, content_dir, subdirs, now))
    return written


def run_flat(site_root, flat_dir='moss', now=None):
    "Indexes the HTML pages directly inside flat_dir"

    if now is None:
        now = render.now_iso()

    dirpath = join(site_root, flat_dir)
    scanner.check_dir(dirpath)

    files = scanner.list_html_files(dirpath)
    where = "%s/" % flat_dir
    page = Page(
        title=where,
        generated_at=now,
        links=[(f, "./" + render.quote_segment(f)) for f in files],
        back_links=[(SITE_ROOT_LABEL, "../")],
        empty=render.render_no_files(where))
    return _write_page(site_root, dirpath, page)
