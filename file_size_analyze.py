#!/usr/bin/env python3

import argparse
import logging
import re
import sys
import threading
import time

import coloredlogs

import config
from localfs import LocalFS
from report import render_table, render_simple, scan_summary, overhead_summary
from stat_counter import StatCounter

BLOCK_SIZE_RE = re.compile(r'([0-9]+)(k?)')


def parse_block_size(value):
    m = BLOCK_SIZE_RE.fullmatch(value)
    if not m:
        raise argparse.ArgumentTypeError(
            "block size should be either a positive integer (number of bytes), "
            "or a positive integer with 'k' suffix (number of kilobytes, e.g. '8k'): %r" % value)
    size = int(m.group(1))
    if m.group(2) == 'k':
        size *= 1024
    return size


class ProgressTicker(threading.Thread):
    def __init__(self, stats: StatCounter, interval=config.progress_interval):
        super().__init__(daemon=True)
        self.stats = stats
        self.interval = interval
        self.start_time = time.monotonic()
        self.stopped = threading.Event()

    def run(self):
        while not self.stopped.wait(self.interval):
            logging.info('Running for %ds, scanned %d files',
                         time.monotonic() - self.start_time, self.stats.total_count)

    def stop(self):
        self.stopped.set()
        self.join()


def build_parser():
    parser = argparse.ArgumentParser(
        description='Group files by size into power-of-two buckets and estimate block allocation overhead.')
    parser.add_argument('root', help='directory to scan recursively')
    parser.add_argument('--block', type=parse_block_size, default=config.block_size,
                        help='disk block (allocation unit) size in bytes, or kilobytes with a k suffix '
                             '(default: %(default)s)')
    parser.add_argument('--out', default='formatted',
                        help="'formatted' for a pretty-printed table, anything else for tab-separated lines")
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    coloredlogs.install(level=logging.DEBUG if args.verbose else config.log_level, fmt=config.log_format)
    logging.debug('Block size = %s bytes', args.block)

    stats = StatCounter(args.block)
    localfs = LocalFS(args.root)
    ticker = ProgressTicker(stats)
    failed = False
    start = time.monotonic()
    ticker.start()
    try:
        localfs.scan(stats)
    except OSError as e:
        logging.error('Error while recursively walking %s: %s', args.root, e)
        failed = True
    finally:
        ticker.stop()
    elapsed = time.monotonic() - start

    print()
    if args.out == 'formatted':
        render_table(stats)
    else:
        render_simple(stats)
    print()
    print(scan_summary(stats.total_count, elapsed))
    print()
    print(overhead_summary(stats))
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
