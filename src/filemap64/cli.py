# src/filemap64/cli.py
import sys
import argparse
import os
from pathlib import Path

# Module imports
from filemap64 import config
from filemap64.core.encoder import encode_files, report_outcomes
from filemap64.core.ignore import load_ignore_spec
from filemap64.exceptions import FileMap64Error, OutputError

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="filemap64",
        description="Compress files with zlib and pack them into a single base64-encoded JSON map.",
        epilog="The encoded result is the only thing written to stdout. Skipped-file warnings and errors go to stderr."
    )
    parser.add_argument("files", nargs="*", help="Individual files to include (keyed by file name)")
    parser.add_argument("-d", "--directory", type=str, default=None, help="Directory containing files to process")
    parser.add_argument("-o", "--output", type=str, default=None, help="Output file for the encoded data (default: stdout)")
    parser.add_argument(
        "-x", "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="gitignore-style pattern to skip during the directory walk (repeatable)"
    )
    parser.add_argument("--exclude-from", type=str, default=None, metavar="FILE", help="Read exclude patterns from FILE")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not report skipped files")
    return parser

def write_output(output_path: Path, data: str) -> None:
    """Writes the result, truncating any existing file; new files get rw-r--r--."""
    try:
        fd = os.open(output_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, config.OUTPUT_FILE_MODE)
        with os.fdopen(fd, "w", encoding="ascii") as f:
            f.write(data)
    except OSError as e:
        raise OutputError(f"Error writing to output file: {e}") from e

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        if not args.directory and not args.files:
            print(config.USAGE_ERROR, file=sys.stderr)
            parser.print_usage(sys.stderr)
            sys.exit(1)

        directory = Path(args.directory) if args.directory else None
        exclude_file = Path(args.exclude_from) if args.exclude_from else None

        # 2. Exclude rules (directory walk only)
        ignore_spec = load_ignore_spec(args.exclude, exclude_file)

        # 3. Collect, compress, encode
        result = encode_files(directory, args.files, ignore_spec)

        if not args.quiet:
            report_outcomes(result.outcomes, sys.stderr)

        # 4. Output
        if args.output:
            write_output(Path(args.output), result.output)
            print(config.WRITE_CONFIRMATION.format(path=args.output))
        else:
            print(result.output)

    except FileMap64Error as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
