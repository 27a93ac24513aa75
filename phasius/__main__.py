import logging
from argparse import ArgumentParser, ArgumentTypeError
from pathlib import Path

from phasius import __version__, get_blocks_per_source
from phasius.annot import parse_bed
from phasius.config import DEFAULT_DECOMPRESSION_THREADS, DEFAULT_THREADS
from phasius.plot import make_figure, write_html
from phasius.summary import write_summary
from phasius.utils import configure_logging, process_region

LOGGER = logging.getLogger(__name__)


def existing_file(pathname: str) -> Path:
    path = Path(pathname)
    if not path.is_file():
        raise ArgumentTypeError(f"Input file {pathname} is invalid")

    return path


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise ArgumentTypeError(f"Expected a positive integer, got: {value}")

    return number


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="phasius",
        description="Tool to draw a map of phaseblocks across crams/bams/vcfs",
    )
    parser.add_argument(
        "input",
        help="cram, bam or vcf files to check (indexed)",
        type=existing_file,
        nargs="+",
    )
    parser.add_argument(
        "-b",
        "--bed",
        help="bed file annotation to use (bgzipped and tabix indexed)",
        type=existing_file,
        default=None,
    )
    parser.add_argument(
        "-t",
        "--threads",
        help="Number of input files to parse in parallel",
        type=positive_int,
        default=DEFAULT_THREADS,
    )
    parser.add_argument(
        "-d",
        "--decompression",
        help="Number of decompression threads to use per cram/bam",
        type=positive_int,
        default=DEFAULT_DECOMPRESSION_THREADS,
    )
    parser.add_argument(
        "-o",
        "--output",
        help="HTML output file name",
        type=str,
        required=True,
    )
    parser.add_argument(
        "-r",
        "--region",
        help="region string to plot phase blocks from, e.g. chr7:152,743,763-156,779,243",
        type=str,
        required=True,
    )
    parser.add_argument(
        "-s",
        "--summary",
        help="Optional tab separated summary output file name",
        type=str,
        default=None,
    )
    parser.add_argument(
        "--line-width",
        help="Line width of the phase blocks in the plot",
        type=float,
        default=None,
    )
    parser.add_argument(
        "--clip",
        help="Clip phase blocks extending beyond the region to its boundaries",
        action="store_true",
        default=False,
    )
    parser.add_argument(
        "--debug",
        help="Enable debug logging to stderr",
        action="store_true",
        default=False,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(args.debug)

    LOGGER.debug("Running with args: %s", args)

    try:
        region = process_region(args.region)
    except ValueError as err:
        parser.error(str(err))

    # any unreadable input aborts the run before an output file is written
    try:
        blocks_per_source = get_blocks_per_source(
            args.input,
            region,
            threads=args.threads,
            decompression_threads=args.decompression,
        )
        annotations = parse_bed(args.bed, region) if args.bed is not None else []
    except (OSError, ValueError) as err:
        LOGGER.debug("Failed reading inputs", exc_info=True)
        parser.exit(1, f"{parser.prog}: error: {err}\n")

    LOGGER.debug("Collected blocks for %s sources", len(blocks_per_source))

    figure = make_figure(blocks_per_source, region, annotations=annotations, width=args.line_width, clip=args.clip)
    write_html(figure, args.output)

    if args.summary is not None:
        write_summary(blocks_per_source, args.summary)


if __name__ == "__main__":
    main()
