# -*- coding: utf-8 -*-

"""
Command line entry point: load settings and print them.
"""

import argparse
import logging
import sys

from cxs_settings.config import KNOWN_KEYS, SettingsRegistry, UnknownKeyPolicy
from cxs_settings.core import SettingsContext, SettingsError, set_settings_context
from cxs_settings.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Load cxs settings and print them.")
    parser.add_argument("config_file", nargs="?", help="configuration file to merge over the defaults")
    parser.add_argument("--key", action="append", dest="keys", metavar="KEY",
                        help="setting to print (repeatable); defaults to all known keys")
    parser.add_argument("--strict", action="store_true",
                        help="reject unknown keys and leave settings untouched on invalid files")
    parser.add_argument("--log-level", default=None, help="logging level (default: CXS_LOG_LEVEL or INFO)")
    return parser


def main(argv=None) -> int:
    """
    Configure logging, seed defaults, merge the optional file and print values.
    """
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    if args.strict:
        registry = SettingsRegistry(unknown_keys=UnknownKeyPolicy.REJECT, transactional=True)
    else:
        registry = SettingsRegistry()
    registry.set_defaults()
    set_settings_context(SettingsContext(registry))

    try:
        if args.config_file:
            registry.process_config_file(args.config_file)
        for key in args.keys or sorted(KNOWN_KEYS):
            print(f"{key}={registry.get_config_value(key)}")
    except SettingsError as exc:
        logging.error("%s (error code %d)", exc, exc.code_num)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
