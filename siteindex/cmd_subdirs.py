import logging

from . import indexer

logger = logging.getLogger("siteindex")


def add_cli_parsers(subparsers):
    subdirs = subparsers.add_parser(
        'subdirs', help="index the subdirectories of a content directory")
    subdirs.add_argument('--content-dir', metavar='DIR',
                         help="content directory, relative to the site root "
                              "(default: from site config, else webapps)")
    subdirs.set_defaults(func=cmd_subdirs)


def cmd_subdirs(args, config):
    content_dir = getattr(args, 'content_dir', None) or config['content-dir']
    logger.debug("indexing subdirs of %s" % content_dir)
    indexer.run(args.root, content_dir)
