import logging

from . import indexer

logger = logging.getLogger("siteindex")


def add_cli_parsers(subparsers):
    flat = subparsers.add_parser(
        'flat', help="index the HTML pages directly inside directories")
    flat.add_argument('dirs', metavar='DIR', nargs='*',
                      help="directories to index, relative to the site root "
                           "(default: from site config, else moss)")
    flat.set_defaults(func=cmd_flat)


def cmd_flat(args, config):
    for flat_dir in args.dirs or config['flat-dirs']:
        logger.debug("indexing %s" % flat_dir)
        indexer.run_flat(args.root, flat_dir)
