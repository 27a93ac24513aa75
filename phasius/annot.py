import logging
from os import PathLike

import pysam

from phasius.models import Annotation, Region

LOGGER = logging.getLogger(__name__)


def parse_bed_line(line: str) -> Annotation:
    """Convert a single BED line into an Annotation, using the 4th column (if any) as its name"""
    fields = line.rstrip("\n").split("\t")
    if len(fields) < 3:
        raise ValueError(f"Malformed BED line, expected at least 3 columns: {line}")

    name = fields[3] if len(fields) > 3 else None
    return Annotation(int(fields[1]), int(fields[2]), name)


def parse_bed(path: str | PathLike, region: Region) -> list[Annotation]:
    """
    Read the intervals of a bgzipped and tabix indexed BED file which overlap the region.
    A ValueError is raised if the chromosome is absent from the index.
    """
    with pysam.TabixFile(str(path)) as tabix_file:
        if region.chrom not in tabix_file.contigs:
            raise ValueError(f"Chromosome {region.chrom} not found in {path}")

        annotations = [parse_bed_line(line) for line in tabix_file.fetch(region.chrom, region.start, region.end)]

    LOGGER.debug("Found %s annotations in %s", len(annotations), path)
    return annotations
