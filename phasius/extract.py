import logging
from os import PathLike
from typing import Iterator

import pysam

from phasius.config import (
    DEFAULT_DECOMPRESSION_THREADS,
    FILE_FORMAT_BAM,
    FILE_FORMAT_CRAM,
    FILE_FORMAT_VCF,
    PHASE_SET_TAG,
)
from phasius.models import PhasedRecord, Region
from phasius.utils import detect_file_format

LOGGER = logging.getLogger(__name__)


def get_phase_set(read: pysam.AlignedSegment) -> int | None:
    """
    Fetch the phase set of an aligned read from its PS aux tag. Returns None for untagged reads,
    and raises a TypeError if the tag holds anything other than an integer.
    """
    if not read.has_tag(PHASE_SET_TAG):
        return None

    phase_set = read.get_tag(PHASE_SET_TAG)
    if not isinstance(phase_set, int):
        raise TypeError(f"Unexpected type of {PHASE_SET_TAG} tag for read {read.query_name}: {type(phase_set)}")

    return phase_set


def is_primary_mapped(read: pysam.AlignedSegment) -> bool:
    return not (read.is_unmapped or read.is_secondary)


def get_reference_end(read: pysam.AlignedSegment) -> int:
    """
    End of the read on the reference. pysam reports None for reads without a CIGAR, which cover no reference
    bases, so their start is used instead.
    """
    if read.reference_end is None:
        return read.reference_start

    return read.reference_end


def iter_alignment_records(
    path: str | PathLike, region: Region, threads: int = DEFAULT_DECOMPRESSION_THREADS
) -> Iterator[PhasedRecord]:
    """
    Yield a PhasedRecord for every mapped, primary read with a phase set overlapping the region of an indexed
    BAM or CRAM file. `threads` is the number of decompression threads handed to htslib.
    """
    with pysam.AlignmentFile(str(path), threads=threads) as alignment_file:
        if region.chrom not in alignment_file.references:
            raise ValueError(f"Chromosome {region.chrom} not found in {path}")

        for read in alignment_file.fetch(region.chrom, region.start, region.end):
            if not is_primary_mapped(read):
                continue

            if (phase_set := get_phase_set(read)) is None:
                continue

            yield PhasedRecord(read.reference_start, get_reference_end(read), phase_set)


def get_variant_phase_set(variant: pysam.VariantRecord) -> int | None:
    """
    Fetch the phase set of a variant from the PS FORMAT field of its first sample. Returns None if the field is
    absent or missing (.), and raises a TypeError if the header declares it as anything but a single integer.
    """
    if PHASE_SET_TAG not in variant.format or len(variant.samples) == 0:
        return None

    phase_set = variant.samples[0].get(PHASE_SET_TAG)
    if phase_set is not None and not isinstance(phase_set, int):
        raise TypeError(
            f"Unexpected type of {PHASE_SET_TAG} field for variant {variant.chrom}:{variant.pos}: {type(phase_set)}"
        )

    return phase_set


def iter_variant_records(
    path: str | PathLike, region: Region, threads: int = DEFAULT_DECOMPRESSION_THREADS
) -> Iterator[PhasedRecord]:
    """
    Yield a PhasedRecord for every variant of an indexed VCF overlapping the region, using the PS FORMAT field
    of the first sample. Variants without a PS value (unphased or missing) are skipped.
    """
    with pysam.VariantFile(str(path), threads=threads) as variant_file:
        if region.chrom not in variant_file.header.contigs:
            raise ValueError(f"Chromosome {region.chrom} not found in {path}")

        for variant in variant_file.fetch(region.chrom, region.start, region.end):
            if (phase_set := get_variant_phase_set(variant)) is None:
                continue

            yield PhasedRecord(variant.start, variant.stop, phase_set)


READER_CONFIG = {
    FILE_FORMAT_BAM: iter_alignment_records,
    FILE_FORMAT_CRAM: iter_alignment_records,
    FILE_FORMAT_VCF: iter_variant_records,
}


def iter_phased_records(
    path: str | PathLike, region: Region, threads: int = DEFAULT_DECOMPRESSION_THREADS
) -> Iterator[PhasedRecord]:
    """Dispatch to the correct reader based on the file extension"""
    file_format = detect_file_format(path)
    LOGGER.debug("Reading %s as %s", path, file_format)

    return READER_CONFIG[file_format](path, region, threads=threads)
