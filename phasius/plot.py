import logging
from itertools import cycle
from os import PathLike
from typing import Iterable, Sequence

import plotly.graph_objects as go

from phasius.config import (
    ANNOTATION_COLOR,
    ANNOTATION_LINE_WIDTH,
    ANNOTATION_ROW,
    DEFAULT_COLORS,
    PLOT_HEIGHT,
    PLOT_TITLE_PREFIX,
    PLOT_Y_AXIS_TITLE,
)
from phasius.models import Annotation, Block, Region

LOGGER = logging.getLogger(__name__)


def is_empty_source(blocks: Sequence[Block]) -> bool:
    """True when a source produced only the sentinel Block (no phased records)"""
    return len(blocks) == 1 and blocks[0].empty


def clip_block(block: Block, limits: tuple[int, int]) -> tuple[int, int]:
    lower, upper = limits
    return max(block.start, lower), min(block.end, upper)


def block_trace(
    block: Block,
    row: int,
    color: str,
    show_legend: bool,
    width: float | None = None,
    limits: tuple[int, int] | None = None,
) -> go.Scatter:
    """
    Draw a single phase block as a horizontal line at height `row`. All blocks of one source share a legend
    group (named after the source), so only the first of them should set `show_legend`. With `limits`, the
    line is clipped to the (lower, upper) coordinates, typically the queried region.
    """
    if block.empty:
        return go.Scatter(x=[], y=[])

    start, end = clip_block(block, limits) if limits is not None else (block.start, block.end)
    line = {"color": color}
    if width is not None:
        line["width"] = width

    return go.Scatter(
        x=[start, end],
        y=[row, row],
        mode="lines",
        name=block.source_name,
        legendgroup=block.source_name,
        showlegend=show_legend,
        line=line,
        hovertemplate=f"{block.source_name}<br>phase set {block.phase_set}<br>%{{x}}<extra></extra>",
    )


def annotation_trace(annotation: Annotation) -> go.Scatter:
    """Annotations are drawn as grey lines below the first source"""
    trace = go.Scatter(
        x=[annotation.begin, annotation.end],
        y=[ANNOTATION_ROW, ANNOTATION_ROW],
        mode="lines",
        showlegend=False,
        line={"color": ANNOTATION_COLOR, "width": ANNOTATION_LINE_WIDTH},
    )
    if annotation.name is not None:
        trace.name = annotation.name

    return trace


def make_figure(
    blocks_per_source: Sequence[Sequence[Block]],
    region: Region,
    annotations: Iterable[Annotation] = (),
    width: float | None = None,
    clip: bool = False,
) -> go.Figure:
    """
    Build the phase block map: one row per source, in input order. Sources without phased records are left
    out entirely and do not take up a row, so the remaining rows stay contiguous. Blocks within a source
    cycle through DEFAULT_COLORS to keep neighbouring blocks distinguishable.
    """
    figure = go.Figure()
    limits = (region.start, region.end) if clip else None

    row = 0
    for blocks in blocks_per_source:
        if is_empty_source(blocks):
            LOGGER.info("Skipping %s, no phase blocks to plot", blocks[0].source_name)
            continue

        for idx, (block, color) in enumerate(zip(blocks, cycle(DEFAULT_COLORS))):
            figure.add_trace(block_trace(block, row, color, show_legend=idx == 0, width=width, limits=limits))
        row += 1

    for annotation in annotations:
        figure.add_trace(annotation_trace(annotation))

    figure.update_layout(
        title=f"{PLOT_TITLE_PREFIX} {region}",
        yaxis={
            "showline": False,
            "title": PLOT_Y_AXIS_TITLE,
            "showgrid": False,
            "showticklabels": False,
            "showspikes": False,
        },
        height=PLOT_HEIGHT,
        legend={"tracegroupgap": 0},
    )
    return figure


def write_html(figure: go.Figure, output: str | PathLike) -> None:
    LOGGER.info("Writing phase block map to %s", output)
    figure.write_html(str(output))
