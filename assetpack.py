import argparse
import os
import sys

from bundling.config import write_template
from bundling.console import log
from bundling.errors import AssetError
from packer import compress, set_verbose


def confirm(question):
    answer = input(f"{question} [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def cmd_template(args):
    if os.path.exists(args.config) and not args.force:
        if not confirm(f"File '{args.config}' already exists. Do you wish to overwrite it?"):
            log("Template not written.")
            return
    write_template(args.config)


def cmd_compress(args):
    compress(args.config, args.bundle_file)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Combine and compress JavaScript and CSS asset bundles")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    subparsers = parser.add_subparsers(dest="command")

    template = subparsers.add_parser("template", help="Create a template configuration file")
    template.add_argument("config", help="Configuration file to create")
    template.add_argument("--force", action="store_true", help="Overwrite an existing file without asking")

    compress_cmd = subparsers.add_parser("compress", help="Combine and compress the configured bundles")
    compress_cmd.add_argument("config", help="Configuration file")
    compress_cmd.add_argument("bundle_file", help="Output bundle configuration file")

    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    try:
        if args.command == "template": cmd_template(args)
        elif args.command == "compress": cmd_compress(args)
        else:
            parser.print_help()
            return 1
    except AssetError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
