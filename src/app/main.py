import argparse
import logging
import os
import sys

from stamp3r.config import load_config
from stamp3r.errors import ConfigError, Mp3Error, Mp3ErrorCode, NoInputFileError, StringEncodingError
from stamp3r.extract import hidden_text
from stamp3r.mp3stream import MP3Stream

logger = logging.getLogger("stamp3r")

# options whose value may itself start with a dash
VALUE_OPTIONS = ("-s", "-o")

LONG_HELP = """
This program can store and retrieve data into/from the private bits of MP3
frame headers. You might like to use it as a way of applying watermarks to
your music files (although it is of course easy to circumvent).

Options:
  -p  Print out the hidden bit data of the input file
  -s  Provide a string to be embedded into the MP3 data
  -o  Specify an output filename for the modified MP3
  -h  Ignore all other options and print this message instead
  -v  Verbose (debug) logging
  --framed         Store/read a 4-byte length ahead of the data, so that
                   zero bytes survive the round trip
  --config PATH    YAML settings file

After the options, provide the name of the source file you want to examine
and/or modify.
"""


class UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser(prog: str) -> argparse.ArgumentParser:
    ap = _Parser(prog=prog, add_help=False, allow_abbrev=False)
    ap.add_argument("-p", dest="print_data", action="store_true")
    ap.add_argument("-s", dest="stego_string")
    ap.add_argument("-o", dest="output_file")
    ap.add_argument("-h", dest="help", action="store_true")
    ap.add_argument("-v", dest="verbose", action="store_true")
    ap.add_argument("--framed", action="store_true", default=None)
    ap.add_argument("--config")
    ap.add_argument("input_file", nargs="?")
    return ap


def attach_values(argv):
    """Join ``-s VALUE`` and ``-o VALUE`` into ``-s=VALUE`` so a VALUE such as
    '-hi' is taken as the argument and not as another option."""
    out = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            out.extend(argv[i:])
            break
        if arg in VALUE_OPTIONS and i + 1 < len(argv):
            out.append(f"{arg}={argv[i + 1]}")
            i += 2
            continue
        out.append(arg)
        i += 1
    return out


def usage(prog: str, verbose: bool = False):
    print(f"usage: {prog} [-p] [-s <stego string>] [-o <output MP3 file>] <input MP3 file>", file=sys.stderr)
    if verbose:
        print(LONG_HELP, end="", file=sys.stderr)
    else:
        print(f"       (or {prog} -h for more help)", file=sys.stderr)


def error(e: Mp3Error) -> int:
    print(f"Error: {e}", file=sys.stderr)
    return int(e.code)


def setup_logging(verbose: bool = False, level: str = "WARNING"):
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, str(level).upper(), logging.WARNING),
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "stamp3r"

    try:
        args = build_parser(prog).parse_args(attach_values(argv))
    except UsageError:
        usage(prog)
        return 1

    if args.help:
        usage(prog, verbose=True)
        return 0
    if not (args.print_data or args.stego_string is not None or args.output_file
            or args.verbose or args.framed is not None or args.config is not None):
        usage(prog)
        return 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        return error(e)
    setup_logging(args.verbose, config["log_level"])
    framed = config["length_prefixed"] if args.framed is None else args.framed
    encoding = config["encoding"]

    try:
        if not args.input_file:
            raise NoInputFileError()

        stream = MP3Stream.load(args.input_file)
        print(f'File "{os.path.basename(args.input_file)}" loaded, '
              f'{stream.private_bits} bits available ({stream.capacity_bytes} bytes)')

        if args.print_data:
            data = stream.payload(length_prefixed=True) if framed else hidden_text(stream.extract())
            if not data:
                print("The file contains no hidden data")
            else:
                print("Hidden data:")
                print(data.decode(encoding, errors="replace"))

        if args.stego_string is not None and args.output_file:
            try:
                payload = args.stego_string.encode(encoding)
            except UnicodeEncodeError as e:
                raise StringEncodingError(f"Can't encode the stego string as {encoding}: {e.reason}") from e
            stream.embed(payload, length_prefixed=framed)
            stream.export(args.output_file)
            logger.info("wrote %s", args.output_file)
        elif args.stego_string is not None or args.output_file:
            logger.warning("-s and -o must be given together to embed data")
    except Mp3Error as e:
        return error(e)
    return int(Mp3ErrorCode.SUCCESS)


if __name__ == "__main__":
    sys.exit(main())
