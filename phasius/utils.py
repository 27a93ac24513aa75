import logging
import sys
from os import PathLike
from pathlib import Path

from phasius.config import FILE_FORMAT_SUFFIXES
from phasius.models import Region


def configure_logging(debug: bool = False) -> None:
    stderr_handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(asctime)s] {%(filename)s:%(lineno)d} %(levelname)s - %(message)s",
        handlers=[stderr_handler],
    )


def process_region(region_string: str) -> Region:
    """
    Parse a region string of the form chrom:start-end into a Region. Commas are allowed as thousands
    separators (chr7:152,743,763-156,779,243), since that is how genome browsers display coordinates.
    Raises a ValueError if the string is malformed or the end is not strictly greater than the start.
    """
    cleaned = region_string.replace(",", "")
    chrom, separator, interval = cleaned.rpartition(":")
    if not separator or not chrom:
        raise ValueError(f"Invalid region: {region_string}, expected the format chrom:start-end")

    start_string, separator, end_string = interval.partition("-")
    if not separator:
        raise ValueError(f"Invalid region: {region_string}, expected the format chrom:start-end")

    try:
        start = int(start_string)
        end = int(end_string)
    except ValueError as err:
        raise ValueError(f"Invalid region: {region_string}, start and end must be integers") from err

    if end <= start:
        raise ValueError("Invalid region: begin has to be smaller than end.")

    return Region(chrom, start, end)


def detect_file_format(path: str | PathLike) -> str:
    """Determine the input format (see FILE_FORMAT_SUFFIXES) from the file name, raising a ValueError if unknown"""
    file_name = Path(path).name
    for suffix, file_format in FILE_FORMAT_SUFFIXES:
        if file_name.endswith(suffix):
            return file_format

    raise ValueError(f"Unsupported file format or file extension not recognized: {path}")


def source_name(path: str | PathLike) -> str:
    """
    Display label for an input file: the base name with a recognized input suffix removed, such that
    /data/sample1.vcf.gz and sample1.bam both become sample1. Unrecognized suffixes are kept.
    """
    file_name = Path(path).name
    for suffix, _ in FILE_FORMAT_SUFFIXES:
        if file_name.endswith(suffix) and len(file_name) > len(suffix):
            return file_name[: -len(suffix)]

    return file_name
