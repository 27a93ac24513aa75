import logging
from os import PathLike
from typing import Sequence

from phasius.config import EMPTY_SUMMARY_BODY, SUMMARY_HEADER
from phasius.models import Block

LOGGER = logging.getLogger(__name__)


def summarize_source(blocks: Sequence[Block]) -> str:
    """
    One tab separated line for a source: its name, the number of blocks and the blocks as start-end pairs
    joined by semicolons. A source with only the sentinel Block reports 0 blocks and a body of "0".
    """
    name = blocks[0].source_name
    if len(blocks) == 1 and blocks[0].empty:
        return f"{name}\t0\t{EMPTY_SUMMARY_BODY}"

    coordinates = ";".join(f"{block.start}-{block.end}" for block in blocks)
    return f"{name}\t{len(blocks)}\t{coordinates}"


def summarize(blocks_per_source: Sequence[Sequence[Block]]) -> str:
    lines = [SUMMARY_HEADER] + [summarize_source(blocks) for blocks in blocks_per_source]
    return "\n".join(lines) + "\n"


def write_summary(blocks_per_source: Sequence[Sequence[Block]], output: str | PathLike) -> None:
    LOGGER.info("Writing summary of %s sources to %s", len(blocks_per_source), output)
    with open(output, "w") as summary_file:
        summary_file.write(summarize(blocks_per_source))
