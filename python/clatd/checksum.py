"""
Internet (ones' complement) checksum arithmetic.

Sums are kept in plain Python integers wider than 16 bits and folded
only when a 16-bit value is needed.
"""


def checksum_add(running: int, data: bytes) -> int:
    """
    Add the ones' complement sum of 'data' to the 'running' accumulator.

    Words are big-endian. An odd trailing byte is the high byte of a zero-padded word.
    """

    total = running
    end = len(data) - len(data) % 2
    for i in range(0, end, 2):
        total += (data[i] << 8) | data[i + 1]
    if end != len(data):
        total += data[end] << 8
    return total


def checksum_fold(acc: int) -> int:
    """Fold carries of the accumulator back into the low 16 bits."""
    while acc > 0xFFFF:
        acc = (acc & 0xFFFF) + (acc >> 16)
    return acc


def checksum_finish(acc: int) -> int:
    return ~checksum_fold(acc) & 0xFFFF


def checksum_adjust(original_field: int, sum_before: int, sum_after: int) -> int:
    """
    Compute a new value of a 16-bit field so that the checksum of the whole structure
    stays the same after bytes summing to 'sum_before' are replaced by bytes summing to 'sum_after'.

    Incremental update as described in RFC 1624, section 3.
    """

    field = ~original_field & 0xFFFF
    folded_sum = checksum_fold(field + sum_after)
    folded_old = checksum_fold(sum_before)
    if folded_sum > folded_old:
        return ~(folded_sum - folded_old) & 0xFFFF
    # end-around borrow
    return ~(folded_sum - folded_old - 1) & 0xFFFF
