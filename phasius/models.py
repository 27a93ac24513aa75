from typing import NamedTuple


class PhasedRecord(NamedTuple):
    """
    A single aligned read or variant call with a phase set. Note (position, end_position) should be ZBHO
    """

    position: int
    end_position: int
    phase_tag: int


class Block(NamedTuple):
    """
    A phase block: the interval covered by a run of records sharing one phase set, for a single source
    (input file). A source without any phased records is represented by a single sentinel Block, with
    `empty` set and both coordinates at zero, so downstream consumers can skip it when plotting and report
    zero blocks when summarizing.
    """

    start: int
    end: int
    source_name: str
    empty: bool = False
    phase_set: int | None = None

    @classmethod
    def sentinel(cls, source_name: str) -> "Block":
        """Build the placeholder Block for a source without a single phased record"""
        return cls(0, 0, source_name, empty=True)


class Region(NamedTuple):
    """Genomic window to query, start and end as given on the command line"""

    chrom: str
    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.chrom}:{self.start}-{self.end}"


class Annotation(NamedTuple):
    begin: int
    end: int
    name: str | None = None
