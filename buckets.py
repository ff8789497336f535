import config


def bucket_index(size):
    """Index i of the range [2^i, 2^(i+1)) holding size; 0 and 1 both map to 0."""
    if size <= 1:
        return 0
    return size.bit_length() - 1


def alloc(size, block_size):
    """Return (blocks, overhead) for a file of the given size.

    Every non-empty file is charged one block on top of size // block_size,
    so an exact multiple of the block size still pays a full block of overhead.
    """
    if size == 0 or block_size == 0:
        return 0, 0
    return size // block_size + 1, block_size - size % block_size


def unitconv(p):
    if p < 10:
        return 1 << p, 'B'
    if p < 20:
        return 1 << (p - 10), 'kB'
    if p < 30:
        return 1 << (p - 20), 'MB'
    return 1 << (p - 30), 'GB'


def size_range(index):
    if index == 0:
        return '0 - 1 B'
    n1, s1 = unitconv(index)
    n2, s2 = unitconv(index + 1)
    if s2 == 'B':
        return '%d - %d %s' % (n1, n2 - 1, s2)
    if s1 == s2:
        return '%d - %d %s' % (n1, n2, s2)
    return '%d %s - %d %s' % (n1, s1, n2, s2)


def overflow_range(index=config.bucket_count):
    return '>= %d %s' % unitconv(index)
