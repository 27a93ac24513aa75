import logging
from functools import reduce, partial
from typing import Iterable

from phasius.models import Block, PhasedRecord

LOGGER = logging.getLogger(__name__)


def sort_records(records: Iterable[PhasedRecord]) -> list[PhasedRecord]:
    """
    Materialize the records and sort them by phase set first and start position second. Records from a
    region query come back in genomic order, but phase sets may interleave (overlapping haplotype blocks),
    so the sort is what guarantees each phase set forms a single consecutive run.
    """
    return sorted(records, key=lambda record: (record.phase_tag, record.position))


def can_extend_block(block: Block, record: PhasedRecord) -> bool:
    """A record extends the running block only if it carries the same phase set"""
    return block.phase_set == record.phase_tag


def start_block(record: PhasedRecord, source_name: str) -> Block:
    return Block(record.position, record.end_position, source_name, phase_set=record.phase_tag)


def extend_reduce(blocks: list[Block], next_record: PhasedRecord, source_name: str) -> list[Block]:
    """
    Helper function to implement extend or append, passed to functools.reduce. The accumulator is treated
    like a stack: peek the head, grow it if the record shares its phase set, otherwise push a new block.
    """
    peek_block = blocks[-1]

    if can_extend_block(peek_block, next_record):
        blocks[-1] = peek_block._replace(end=max(peek_block.end, next_record.end_position))
    else:
        blocks.append(start_block(next_record, source_name))

    return blocks


def build_blocks(records: Iterable[PhasedRecord], source_name: str) -> list[Block] | None:
    """
    Given the phased records of a single source, collapse them into phase blocks. Records are sorted by
    (phase set, start) and then folded with functools.reduce: every change of phase set closes the running
    block and opens a new one. Blocks are therefore ordered by phase set, then start.

    Returns None when there is not a single record, which is an expected outcome (a region may simply hold no
    phased data) and is left to the caller to report.

    .. code-block:: python

        >>> from phasius.blocks import build_blocks
        >>> from phasius.models import PhasedRecord
        >>> build_blocks([PhasedRecord(5, 6, 2), PhasedRecord(1, 2, 1), PhasedRecord(3, 4, 1)], "sample")
        [
            Block(start=1, end=4, source_name='sample', empty=False, phase_set=1),
            Block(start=5, end=6, source_name='sample', empty=False, phase_set=2),
        ]
    """
    sorted_records = sort_records(records)
    if len(sorted_records) == 0:
        return None

    wrapped_extend_func = partial(extend_reduce, source_name=source_name)
    blocks = reduce(wrapped_extend_func, sorted_records[1:], [start_block(sorted_records[0], source_name)])
    LOGGER.debug("Collapsed %s phased records into %s blocks for %s", len(sorted_records), len(blocks), source_name)

    return blocks
