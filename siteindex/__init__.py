#!/usr/bin/env python3

import os

PKG_DIR = os.path.dirname(os.path.realpath(__file__))

LOGGING_FORMAT_PREFIX = \
    "%(levelname)s:%(filename)s:%(lineno)s:%(funcName)s - "


class IndexerError(RuntimeError):
    pass


class MissingRootError(IndexerError):

    def __init__(self, path):
        super().__init__("Missing directory: %s" % path)
        self.path = path


class ReadError(IndexerError):

    def __init__(self, path, cause):
        super().__init__("failed to list %s: %s" % (path, cause))
        self.path = path
        self.cause = cause


class WriteError(IndexerError):

    def __init__(self, path, cause):
        super().__init__("failed to write %s: %s" % (path, cause))
        self.path = path
        self.cause = cause
