#!/usr/bin/env python3

"""
Enumerate the directories and HTML pages one level below a directory.
"""

import os
import re
import locale
import logging

import pyuca

from . import MissingRootError
from . import ReadError

logger = logging.getLogger("siteindex")

HTML_RE = re.compile(r'\.html?$', re.IGNORECASE)
INDEX_NAME = 'index.html'

# Unicode Collation Algorithm with the default table, which is what "en"
# uses. A collation locale, once set, switches to the C library's strxfrm.
_uca = None
_locale = None


def use_locale(name):
    "Collates with the given system locale instead of the default table"
    global _locale
    locale.setlocale(locale.LC_COLLATE, name)
    _locale = name


def use_default_collation():
    global _locale
    _locale = None


def sort_key(name):
    "Collation key, with the raw name to break ties"
    global _uca
    if _locale is not None:
        return (locale.strxfrm(name), name)
    if _uca is None:
        _uca = pyuca.Collator()
    return (_uca.sort_key(name), name)


def collate(names):
    return sorted(names, key=sort_key)


def check_dir(dirpath):
    if not os.path.isdir(dirpath):
        raise MissingRootError(dirpath)


def _entries(dirpath):
    try:
        with os.scandir(dirpath) as it:
            return list(it)
    except OSError as e:
        raise ReadError(dirpath, e) from e


def is_html_name(name):
    return bool(HTML_RE.search(name)) and name.lower() != INDEX_NAME


def list_immediate_subdirs(dirpath):
    "Returns the sorted names of the non-hidden directories in dirpath"

    check_dir(dirpath)
    names = [e.name for e in _entries(dirpath)
             if e.is_dir(follow_symlinks=False)
             and not e.name.startswith('.')]
    logger.debug("found %d subdirs in %s", len(names), dirpath)
    return collate(names)


def list_html_files(dirpath):
    "Returns the sorted names of the HTML pages in dirpath, minus index.html"

    names = [e.name for e in _entries(dirpath)
             if e.is_file(follow_symlinks=False) and is_html_name(e.name)]
    logger.debug("found %d html files in %s", len(names), dirpath)
    return collate(names)
