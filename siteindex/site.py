#!/usr/bin/env python3

import os
import yaml
import locale
import logging

import pykwalify.core
import pykwalify.errors

from . import PKG_DIR
from . import scanner

logger = logging.getLogger("siteindex")

DEFAULT_CONF = 'site.yaml'

DEFAULTS = {
    'content-dir': 'webapps',
    'flat-dirs': ['moss'],
    'collation-locale': None,
}


class ConfigError(SyntaxError):
    '''
        Raised for a site config that can't be read or doesn't match
        the schema. We inherit from SyntaxError for the msg field.
    '''
    pass


def load(site_root, fpath=None):
    '''
        Returns the site config as a dict, with defaults filled in. If
        fpath is None, site.yaml in the site root is used if it exists.
    '''

    if fpath is None:
        fpath = os.path.join(site_root, DEFAULT_CONF)
        if not os.path.isfile(fpath):
            logger.debug("no %s found, using defaults" % fpath)
            return dict(DEFAULTS)

    try:
        with open(fpath, encoding='utf-8') as f:
            filedata = f.read()
        config = yaml.safe_load(filedata)
    except FileNotFoundError:
        raise ConfigError("config file %s not found" % fpath)
    except UnicodeDecodeError:
        raise ConfigError("file is not valid UTF-8")
    except yaml.YAMLError:
        raise ConfigError("file could not be parsed as valid YAML")

    # an empty file is a valid, empty config
    if config is None:
        config = {}
    if type(config) is not dict:
        raise ConfigError("top-level type should be a dict")

    _validate(config)
    logger.debug("loaded site config from %s" % fpath)

    merged = dict(DEFAULTS)
    merged.update(config)
    return merged


def _validate(config):

    schema = os.path.join(PKG_DIR, "schema.yml")

    try:
        c = pykwalify.core.Core(source_data=config,
                                schema_files=[schema])
        c.validate(raise_exception=True)
    except pykwalify.errors.PyKwalifyException as e:
        raise ConfigError(e.msg)


def apply_collation(config):
    "Collates with the configured locale, or the default table if none"

    name = config.get('collation-locale')
    if not name:
        scanner.use_default_collation()
        return
    try:
        scanner.use_locale(name)
    except locale.Error:
        raise ConfigError("unsupported collation locale: %s" % name)
    logger.debug("collating with locale %s" % name)
