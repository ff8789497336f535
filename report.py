import sys

import humanize
from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.table import Table

from stat_counter import Row, StatCounter

HEADERS = ['#', 'File size', 'Files count', 'Occupied (bytes)', 'Occupied',
           'Avg. AU', 'Total AU', 'Avg. OHD', 'Total OHD']
MAX_TABLE_WIDTH = 1000


def average(total, count):
    if not count:
        return '--'
    return '%.2f' % (total / count)


def table_cells(row: Row):
    if not row.count:
        return [row.label, row.range, '0'] + ['--'] * 6
    return [
        row.label,
        row.range,
        str(row.count),
        str(row.size),
        humanize.naturalsize(row.size),
        average(row.blocks, row.count),
        str(row.blocks),
        average(row.overhead, row.count),
        humanize.naturalsize(row.overhead),
    ]


def build_table(stats: StatCounter):
    table = Table(box=box.SIMPLE_HEAD, header_style='bold cyan')
    for i, header in enumerate(HEADERS):
        table.add_column(header, justify='left' if i < 2 else 'right', no_wrap=True)
    for row in stats.rows():
        table.add_row(*table_cells(row))
    overflow = stats.overflow_row()
    if overflow is not None:
        table.add_row(*table_cells(overflow), style='yellow')
    table.add_section()
    table.add_row(*table_cells(stats.total_row()), style='bold')
    return table


def table_width(console: Console, table: Table):
    return Measurement.get(console, console.options.update_width(MAX_TABLE_WIDTH), table).maximum


def render_table(stats: StatCounter, console=None):
    """Print the table at its natural width, even when that is wider than the console."""
    if console is None:
        console = Console()
    table = build_table(stats)
    size = console.size
    console.size = (max(size.width, table_width(console, table)), size.height)
    try:
        console.print(table)
    finally:
        console.size = size


def simple_line(row: Row):
    return '%s\t%s\t%d\t%d\t%s' % (row.label, row.range, row.count, row.size, humanize.naturalsize(row.size))


def render_simple(stats: StatCounter, out=None):
    if out is None:
        out = sys.stdout
    for row in stats.rows():
        print(simple_line(row), file=out)
    overflow = stats.overflow_row()
    if overflow is not None:
        print(simple_line(overflow), file=out)


def scan_summary(total_count, elapsed):
    fps = total_count / elapsed if total_count and elapsed > 0 else 0.0
    return 'Scanned %d files in %.3fs (avg. %.2f files per second).' % (total_count, elapsed, fps)


def overhead_summary(stats: StatCounter):
    """Compare the actual overhead with the half-a-block-per-file rule of thumb."""
    actual = stats.total_overhead
    estimate = stats.total_count * stats.block_size // 2
    line = 'Rough estimate of overhead per %d files using allocation units of %d bytes is %s. ' \
           'Actual overhead of %s' % (stats.total_count, stats.block_size,
                                      humanize.naturalsize(estimate), humanize.naturalsize(actual))
    if not estimate:
        return line + '.'
    prc = 1 - actual / estimate
    sign = 'better'
    if prc < 0:
        prc = -prc
        sign = 'worse'
    return line + ' is %.2f%% %s.' % (100 * prc, sign)
