import argparse
import logging
import sys

from rangegaps import point_gaps


def read_ids(fp):
    for line in fp:
        line = line.strip()
        if line:
            yield int(line)


def run(fp, start, stop):
    for gap in point_gaps(read_ids(fp), start=start, stop=stop):
        if gap.upper - gap.lower == 1:
            print(gap.lower)
        else:
            print("%d-%d" % (gap.lower, gap.upper - 1))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print the IDs missing from a sorted list")
    parser.add_argument("filename", nargs="?", help="File with one ID per line (default: stdin)")
    parser.add_argument("--start", type=int, help="First ID expected")
    parser.add_argument("--stop", type=int, help="Last ID expected, plus one")
    parser.add_argument("--verbose", "-v", action="count")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.filename:
        with open(args.filename) as fp:
            run(fp, args.start, args.stop)
    else:
        run(sys.stdin, args.start, args.stop)
