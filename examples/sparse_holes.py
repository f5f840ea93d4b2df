import argparse
import errno
import logging
import os

from rangegaps import gaps

logger = logging.getLogger("sparse")


def data_extents(fd, size):
    """
    Yield the `(offset, end)` extents of a file which hold data.
    """
    offset = 0
    while offset < size:
        try:
            start = os.lseek(fd, offset, os.SEEK_DATA)
        except OSError as exc:
            # no data past this offset
            if exc.errno == errno.ENXIO:
                return
            raise
        end = os.lseek(fd, start, os.SEEK_HOLE)
        logger.debug("Data from %d to %d", start, end)
        yield start, end
        offset = end


def run(filename):
    with open(filename, "rb") as fp:
        size = os.fstat(fp.fileno()).st_size
        for hole in gaps(data_extents(fp.fileno(), size), start=0, stop=size):
            print("hole at %d, %d bytes" % (hole.lower, hole.upper - hole.lower))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="List the holes of a sparse file")
    parser.add_argument("filename")
    parser.add_argument("--verbose", "-v", action="count")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    run(args.filename)
