import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from os import PathLike
from typing import Sequence

from phasius.blocks import build_blocks
from phasius.config import DEFAULT_DECOMPRESSION_THREADS, DEFAULT_THREADS
from phasius.extract import iter_phased_records
from phasius.models import Block, Region
from phasius.utils import source_name

__version__ = "0.1.0"

LOGGER = logging.getLogger(__name__)


def get_blocks(
    path: str | PathLike, region: Region, threads: int = DEFAULT_DECOMPRESSION_THREADS
) -> list[Block]:
    """
    Read the phased records of a single input file (BAM, CRAM or VCF, indexed) within the region and collapse
    them into phase blocks, see `phasius.blocks.build_blocks` for how blocks are formed. `threads` is the
    number of decompression threads used for alignment files.

    If the file holds no phased record in the region, a warning is logged and a list with a single sentinel
    Block (`empty=True`) is returned instead, so the source can still be reported downstream.

    .. code-block:: python

        >>> from phasius import get_blocks
        >>> from phasius.utils import process_region
        >>> get_blocks("sample1.bam", process_region("chr7:152,743,763-156,779,243"))
        [
            Block(start=152743801, end=153910332, source_name='sample1', empty=False, phase_set=152743801),
            Block(start=153911220, end=156779013, source_name='sample1', empty=False, phase_set=153911220)
        ]
    """
    name = source_name(path)
    blocks = build_blocks(iter_phased_records(path, region, threads=threads), name)

    if blocks is None:
        LOGGER.warning("Not a single phased record found in the interval for %s!", name)
        return [Block.sentinel(name)]

    LOGGER.info("Found %s phase blocks for %s", len(blocks), name)
    return blocks


def get_blocks_per_source(
    paths: Sequence[str | PathLike],
    region: Region,
    threads: int = DEFAULT_THREADS,
    decompression_threads: int = DEFAULT_DECOMPRESSION_THREADS,
) -> list[list[Block]]:
    """
    Run `get_blocks` for every input file, with up to `threads` files processed in parallel. The result is
    indexed like `paths` (the i-th list of blocks belongs to the i-th file) regardless of the order in which
    the files finish. Any error reading a file is raised from here and aborts the whole batch.
    """
    if threads < 1:
        raise ValueError(f"Number of threads must be at least 1, got: {threads}")

    wrapped_get_blocks = partial(get_blocks, region=region, threads=decompression_threads)
    with ThreadPoolExecutor(max_workers=threads) as executor:
        return list(executor.map(wrapped_get_blocks, paths))
