"""Command line front end for inspecting properties files."""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from .exceptions import DotPropsError
from .properties import Properties, load_file

GETTERS = {
    "str": Properties.get_string,
    "int": Properties.get_int,
    "float": Properties.get_float,
    "bool": Properties.get_bool,
}


def _parse_command_line(args: List[str]) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(prog="dotprops", description="Inspect a dotprops properties file")
    parser.add_argument("file", help="Properties file to load.")
    parser.add_argument("--get", dest="get_key", metavar="KEY", help="Print the value at a dotted key")
    parser.add_argument("--type", dest="value_type", choices=sorted(GETTERS), default="str", help="Type of --get value")
    parser.add_argument("--subkeys", dest="subkeys_key", metavar="KEY", help="Print immediate subkeys of a key")
    parser.add_argument("--exists", dest="exists_key", metavar="KEY", help="Exit 0 if the key exists, 1 otherwise")
    parser.add_argument("--print", dest="print_config", action="store_true", help="Print all values as YAML")
    parser.add_argument("--strict-keys", action="store_true", help="Reject keys with empty segments")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the properties file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(args)


def _print_config(props: Properties) -> None:
    """Print flattened properties in YAML format."""
    print(yaml.safe_dump(props.pretty(), default_flow_style=False, sort_keys=True), end="")


def main(args: Optional[List[str]] = None) -> int:
    """Run the command line front end.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    if args is None:
        args = sys.argv[1:]

    parsed_args = _parse_command_line(args)
    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s: %(message)s",
    )

    try:
        props = load_file(parsed_args.file, encoding=parsed_args.encoding, strict_keys=parsed_args.strict_keys)

        if parsed_args.exists_key is not None:
            return 0 if props.key_exists(parsed_args.exists_key) else 1

        if parsed_args.get_key is not None:
            value = GETTERS[parsed_args.value_type](props, parsed_args.get_key)
            print(str(value).lower() if isinstance(value, bool) else value)

        if parsed_args.subkeys_key is not None:
            for subkey in sorted(props.subkeys(parsed_args.subkeys_key)):
                print(subkey)

        if parsed_args.print_config:
            _print_config(props)
    except (DotPropsError, OSError, UnicodeDecodeError) as e:
        print(f"dotprops: {e}", file=sys.stderr)
        return 1

    return 0
