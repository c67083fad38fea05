#!/usr/bin/env python3
"""Convert a directory of DCL images to BMP files.

Every matching file is converted on its own; a file that fails to decode is
reported and skipped.
"""
import logging
import sys
from argparse import ArgumentParser

import dclconv
from dclconv.high_level import convert_dir

logging.basicConfig(format="%(message)s")


def create_parser():
    parser = ArgumentParser(description=__doc__, add_help=True)
    parser.add_argument(
        "indir", type=str,
        help="Directory holding the DCL files.")
    parser.add_argument(
        "outdir", type=str,
        help="Directory to write the BMP files to. Created if missing.")
    parser.add_argument(
        "--version", "-v", action="version",
        version="dclconv v{}".format(dclconv.__version__))
    parser.add_argument(
        "--debug", "-d", default=False, action="store_true",
        help="Use debug logging level.")
    parser.add_argument(
        "--pattern", "-p", type=str, default="*.DCL",
        help="File name pattern to convert, matched ignoring case "
             "(default %(default)s).")
    return parser


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(args=argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)

    log = logging.getLogger(__name__)
    try:
        report = convert_dir(args.indir, args.outdir, pattern=args.pattern)
    except OSError as e:
        log.error("Error: %s", e)
        return 1

    if not report:
        log.warning(
            "No files matching %s in %s", args.pattern, args.indir)
    else:
        log.info("Conversion completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
