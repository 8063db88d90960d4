#!/usr/bin/env python3

import os
import logging

from . import WriteError

logger = logging.getLogger("siteindex")


def write_file(path, data):
    "Writes data to path as UTF-8, creating parent dirs as needed"
    logger.debug("writing %s" % path)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(path, e) from e
    return os.path.abspath(path)


def relpath(path, start):
    "Site-relative path with forward slashes, for console output"
    return os.path.relpath(path, start).replace(os.sep, '/')
