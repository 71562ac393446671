#!/usr/bin/env python3
"""Draw a sample of lines from a CWB concordance.

Usage examples:
    python scripts/sample_concordance.py -m sp -b 10 concordance.txt
    python scripts/sample_concordance.py --method rf --basis 100 --header < concordance.txt
    python scripts/sample_concordance.py -m sf -b 50 -h -f csv concordance.txt --output sample.csv

Methods (--method/-m):
    sp  systematicproportion  every n-th line, n given by --basis (default 2),
                              first line given by --offset (default n)
    sf  systematicfixed       every n-th line with n = N / basis (default 50),
                              N taken from the '# Size:' line of the CWB header
    rp  randomproportion      each line kept with probability --basis (default 0.5)
    rf  randomfixed           uniform random sample of --basis lines (default 50)

--header/-h keeps the CWB header and records sample size and method in it.
--format/-f csv turns each hit into a row of quoted fields.
Input is read from the given file, or from standard input.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional

# ensure project root on path (so `from csample...` imports work when running the script)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config.logging_config import configure_logging
from config.settings import settings
from csample.pipeline.runner import run_sampling, write_output
from csample.sampling import SamplingConfigError

logger = logging.getLogger("csample")


def iter_input_lines(path: Optional[str]) -> Iterator[str]:
    """Yield lines from ``path``; ``-`` or no path means stdin.

    Bytes that are not valid UTF-8 (Latin-1 concordances) are carried through
    as surrogate escapes and written back unchanged.
    """
    if not path or path == "-":
        yield from sys.stdin
        return
    with open(path, "r", encoding=settings.ENCODING, errors=settings.ENCODING_ERRORS) as fh:
        yield from fh


def build_parser() -> argparse.ArgumentParser:
    # -h belongs to --header, as in csample.pl; help stays available as --help
    p = argparse.ArgumentParser(
        prog="csample",
        description="Draw systematic or random samples from CWB concordances.",
        add_help=False,
    )
    p.add_argument("input", nargs="?", default=None, help="Concordance file; standard input when omitted or '-'")
    p.add_argument("-m", "--method", default=settings.DEFAULT_METHOD, help="sp, sf, rp or rf (long names accepted)")
    p.add_argument("-b", "--basis", type=float, default=settings.DEFAULT_BASIS, help="Stride, sample size or probability depending on the method (0 = method default)")
    p.add_argument("-o", "--offset", type=int, default=settings.DEFAULT_OFFSET, help="First line to include (method sp only)")
    p.add_argument("-h", "--header", action="store_true", help="Include the CWB header, annotated with sample size and method")
    p.add_argument("-f", "--format", default=settings.DEFAULT_FORMAT, choices=sorted(settings.OUTPUT_FORMATS), help="Output format")
    p.add_argument("--output", default=None, help="Write the sample to this file instead of standard output")
    p.add_argument("--seed", type=int, default=settings.RANDOM_SEED, help="Seed for the random generator (reproducible samples)")
    p.add_argument("--marker", default=settings.HEADER_MARKER, help="Prefix of header lines")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--help", action="help", help="Show this message and exit")
    return p


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    for stream in (sys.stdin, sys.stdout):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding=settings.ENCODING, errors=settings.ENCODING_ERRORS)
    configure_logging(debug=args.debug, level=settings.LOG_LEVEL)

    try:
        _, output = run_sampling(
            iter_input_lines(args.input),
            method=args.method,
            basis=args.basis,
            offset=args.offset,
            include_header=args.header,
            output_format=args.format,
            random_state=args.seed,
            marker=args.marker,
        )
    except SamplingConfigError as exc:
        logger.error("%s", exc)
        print(f"csample: error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        logger.error("Could not read input: %s", exc)
        print(f"csample: error: {exc}", file=sys.stderr)
        return 1

    write_output(output, Path(args.output) if args.output else None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
