from pathlib import Path
from tempfile import TemporaryDirectory

from phasius.config import ANNOTATION_ROW, DEFAULT_COLORS, PLOT_HEIGHT
from phasius.models import Annotation, Block
from phasius.plot import annotation_trace, block_trace, is_empty_source, make_figure, write_html
from tests.base import PhasiusBaseCase


class IsEmptySourceTestCase(PhasiusBaseCase):
    def test_is_empty_source_sentinel(self):
        self.assertTrue(is_empty_source([Block.sentinel("sample")]))

    def test_is_empty_source_blocks(self):
        self.assertFalse(is_empty_source([self.make_block(0, 10)]))


class BlockTraceTestCase(PhasiusBaseCase):
    def test_block_trace(self):
        trace = block_trace(self.make_block(100, 200, "sample1"), 3, DEFAULT_COLORS[0], show_legend=True)

        self.assertEqual(tuple(trace.x), (100, 200))
        self.assertEqual(tuple(trace.y), (3, 3))
        self.assertEqual(trace.mode, "lines")
        self.assertEqual(trace.name, "sample1")
        self.assertEqual(trace.legendgroup, "sample1")
        self.assertTrue(trace.showlegend)
        self.assertEqual(trace.line.color, DEFAULT_COLORS[0])
        self.assertIsNone(trace.line.width)

    def test_block_trace_width(self):
        trace = block_trace(self.make_block(100, 200), 0, DEFAULT_COLORS[1], show_legend=False, width=8)

        self.assertFalse(trace.showlegend)
        self.assertEqual(trace.line.width, 8)

    def test_block_trace_limits(self):
        trace = block_trace(self.make_block(100, 900), 0, DEFAULT_COLORS[0], show_legend=True, limits=(250, 500))
        self.assertEqual(tuple(trace.x), (250, 500))

    def test_block_trace_limits_inside(self):
        trace = block_trace(self.make_block(300, 400), 0, DEFAULT_COLORS[0], show_legend=True, limits=(250, 500))
        self.assertEqual(tuple(trace.x), (300, 400))

    def test_block_trace_empty(self):
        trace = block_trace(Block.sentinel("sample"), 0, DEFAULT_COLORS[0], show_legend=True)
        self.assertEqual(tuple(trace.x), ())


class AnnotationTraceTestCase(PhasiusBaseCase):
    def test_annotation_trace(self):
        trace = annotation_trace(Annotation(10, 20, "GENE1"))

        self.assertEqual(tuple(trace.x), (10, 20))
        self.assertEqual(tuple(trace.y), (ANNOTATION_ROW, ANNOTATION_ROW))
        self.assertEqual(trace.name, "GENE1")
        self.assertFalse(trace.showlegend)
        self.assertEqual(trace.line.width, 3)

    def test_annotation_trace_unnamed(self):
        self.assertIsNone(annotation_trace(Annotation(10, 20)).name)


class MakeFigureTestCase(PhasiusBaseCase):
    def setUp(self):
        self.region = self.make_region("chr1", 0, 1000)
        self.blocks_per_source = [
            [self.make_block(0, 100, "sample1"), self.make_block(200, 300, "sample1", phase_set=2)],
            [Block.sentinel("sample2")],
            [self.make_block(50, 1500, "sample3")],
        ]

    def test_make_figure_skips_empty_sources(self):
        figure = make_figure(self.blocks_per_source, self.region)

        self.assertEqual([trace.name for trace in figure.data], ["sample1", "sample1", "sample3"])
        self.assertEqual([trace.y[0] for trace in figure.data], [0, 0, 1])

    def test_make_figure_legend_once_per_source(self):
        figure = make_figure(self.blocks_per_source, self.region)
        self.assertEqual([trace.showlegend for trace in figure.data], [True, False, True])

    def test_make_figure_cycles_colors(self):
        blocks = [[self.make_block(idx, idx + 1, phase_set=idx) for idx in range(len(DEFAULT_COLORS) + 1)]]
        figure = make_figure(blocks, self.region)

        colors = [trace.line.color for trace in figure.data]
        self.assertEqual(colors[: len(DEFAULT_COLORS)], list(DEFAULT_COLORS))
        self.assertEqual(colors[-1], DEFAULT_COLORS[0])

    def test_make_figure_clip(self):
        figure = make_figure(self.blocks_per_source, self.region, clip=True)
        self.assertEqual(tuple(figure.data[-1].x), (50, 1000))

    def test_make_figure_annotations(self):
        figure = make_figure(self.blocks_per_source, self.region, annotations=[Annotation(5, 10, "GENE1")])

        self.assertEqual(len(figure.data), 4)
        self.assertEqual(figure.data[-1].name, "GENE1")

    def test_make_figure_layout(self):
        figure = make_figure(self.blocks_per_source, self.region)

        self.assertEqual(figure.layout.title.text, "Phase block map chr1:0-1000")
        self.assertEqual(figure.layout.yaxis.title.text, "Individuals")
        self.assertFalse(figure.layout.yaxis.showticklabels)
        self.assertFalse(figure.layout.yaxis.showgrid)
        self.assertEqual(figure.layout.height, PLOT_HEIGHT)
        self.assertEqual(figure.layout.legend.tracegroupgap, 0)

    def test_make_figure_all_empty(self):
        figure = make_figure([[Block.sentinel("sample1")], [Block.sentinel("sample2")]], self.region)
        self.assertEqual(len(figure.data), 0)

    def test_write_html(self):
        figure = make_figure(self.blocks_per_source, self.region)
        with TemporaryDirectory() as tmp_dir:
            output = Path(tmp_dir) / "map.html"
            write_html(figure, output)

            self.assertIn("sample3", output.read_text())
