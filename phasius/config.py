DEFAULT_THREADS: int = 4
DEFAULT_DECOMPRESSION_THREADS: int = 1

# aux tag (BAM/CRAM) and FORMAT field (VCF) holding the phase set identifier
PHASE_SET_TAG: str = "PS"

FILE_FORMAT_BAM: str = "bam"
FILE_FORMAT_CRAM: str = "cram"
FILE_FORMAT_VCF: str = "vcf"

# order matters, longest suffix first so "x.vcf.gz" is not seen as a ".gz" file
FILE_FORMAT_SUFFIXES: tuple[tuple[str, str], ...] = (
    (".vcf.gz", FILE_FORMAT_VCF),
    (".vcf", FILE_FORMAT_VCF),
    (".cram", FILE_FORMAT_CRAM),
    (".bam", FILE_FORMAT_BAM),
)

# plotly's default qualitative colors
DEFAULT_COLORS: tuple[str, ...] = (
    "#1f77b4",  # muted blue
    "#ff7f0e",  # safety orange
    "#2ca02c",  # cooked asparagus green
    "#d62728",  # brick red
    "#9467bd",  # muted purple
    "#8c564b",  # chestnut brown
    "#e377c2",  # raspberry yogurt pink
    "#7f7f7f",  # middle gray
    "#bcbd22",  # curry yellow-green
    "#17becf",  # blue-teal
)

ANNOTATION_ROW: int = -2
ANNOTATION_COLOR: str = "rgb(128, 128, 128)"
ANNOTATION_LINE_WIDTH: float = 3.0

PLOT_HEIGHT: int = 1000
PLOT_TITLE_PREFIX: str = "Phase block map"
PLOT_Y_AXIS_TITLE: str = "Individuals"

SUMMARY_HEADER: str = "sample_name\tnum_blocks\tblock_coordinates"
EMPTY_SUMMARY_BODY: str = "0"
