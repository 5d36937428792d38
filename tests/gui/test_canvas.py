import numpy as np
import pytest
from PyQt6.QtGui import QColor, QImage, QPainter

from simscope.core.layout import Rect
from simscope.gui.canvas import Align, DrawBatch, LinePrim, PolylinePrim, RectPrim, TextPrim
from simscope.gui.style import DEFAULT_STYLE, OverlayStyle


class TestRecording:
    def test_degenerate_primitives_skipped(self):
        batch = DrawBatch()
        batch.rect(Rect(0, 0, 0, 10), '#fff')
        batch.rect(Rect(0, 0, 10, -1), '#fff')
        batch.polyline(np.array([[1.0, 2.0]]), '#fff')
        batch.text(0, 0, "")
        assert batch.primitives == []

    def test_insertion_order_kept(self):
        batch = DrawBatch()
        batch.rect(Rect(0, 0, 5, 5), '#fff')
        batch.line(0, 0, 1, 1, '#fff')
        batch.polyline(np.array([[0, 0], [1, 1]]), '#fff')
        batch.text(1, 1, "hi")

        kinds = [type(p) for p in batch.primitives]
        assert kinds == [RectPrim, LinePrim, PolylinePrim, TextPrim]

    def test_text_default_color_and_alignment(self):
        batch = DrawBatch()
        batch.text(3, 4, "x", align=Align.RIGHT)
        prim = batch.of_type(TextPrim)[0]
        assert prim.color == DEFAULT_STYLE.color('text')
        assert prim.align is Align.RIGHT

    def test_unknown_color_role_falls_back_to_text(self):
        style = OverlayStyle()
        assert style.color('no-such-role') == style.color('text')


class TestLifecycle:
    def test_cleared_on_enter_and_exit(self):
        batch = DrawBatch()
        batch.text(0, 0, "stale")

        with batch as b:
            assert b.primitives == []
            b.text(0, 0, "fresh")
            assert b.texts() == ["fresh"]

        assert batch.primitives == []

    def test_cleared_when_block_raises(self):
        batch = DrawBatch()
        with pytest.raises(RuntimeError):
            with batch:
                batch.text(0, 0, "x")
                raise RuntimeError("boom")
        assert batch.primitives == []


class TestFlush:
    @pytest.fixture
    def image(self, qapp):
        img = QImage(200, 100, QImage.Format.Format_ARGB32)
        img.fill(QColor('#000000'))
        return img

    def test_filled_rect_painted(self, image):
        batch = DrawBatch()
        batch.rect(Rect(10, 10, 50, 20), '#ff0000')
        batch.line(0, 90, 199, 90, '#00ff00')
        batch.polyline(np.array([[0, 0], [50, 50], [100, 0]]), '#ffffff')
        batch.text(150, 50, "ok", align=Align.CENTER, vcenter=True)

        painter = QPainter(image)
        batch.flush(painter)
        painter.end()

        assert QColor(image.pixel(30, 20)).name() == '#ff0000'
        assert batch.primitives == []

    def test_outline_leaves_inside_untouched(self, image):
        batch = DrawBatch()
        batch.rect(Rect(10, 10, 50, 50), '#ff0000', filled=False)

        painter = QPainter(image)
        batch.flush(painter)
        painter.end()

        assert QColor(image.pixel(35, 35)).name() == '#000000'
