import os
import argparse
import logging

from . import LOGGING_FORMAT_PREFIX
from . import MissingRootError
from . import cmd_flat
from . import cmd_subdirs
from . import site

logger = logging.getLogger("siteindex")

logging.basicConfig(format=(LOGGING_FORMAT_PREFIX + "%(message)s"))


def main(argv=None):

    parser = argparse.ArgumentParser(
        description="Generate index.html listings for a static site")
    parser.add_argument('--debug', action='store_true',
                        help="Print debugging information")
    parser.add_argument('--root', metavar='DIR', default=os.getcwd(),
                        help="Site root (default: current directory)")
    parser.add_argument('--conf', metavar='SITE.YAML',
                        help="Site configuration file "
                             "(default: site.yaml in the site root, if any)")

    subparsers = parser.add_subparsers(dest='cmd', metavar='<command>',
                                       title='subcommands')

    cmd_subdirs.add_cli_parsers(subparsers)
    cmd_flat.add_cli_parsers(subparsers)

    # no subcommand means indexing the content directory's subdirs
    parser.set_defaults(func=cmd_subdirs.cmd_subdirs)

    args = parser.parse_args(argv)

    if args.debug:
        # we just use the root logger for now
        logger.setLevel(logging.DEBUG)
        logger.debug("debug logging turned on")
    else:
        logger.setLevel(logging.INFO)

    try:
        config = site.load(args.root, args.conf)
        site.apply_collation(config)
        args.func(args, config)
    except (MissingRootError, site.ConfigError) as e:
        logger.error("%s", e)
        return 1
    except Exception:
        logger.exception("failed to generate indexes")
        return 1

    return 0
