import unittest

from arena_config import CONFIG
from arena_layout import PREVIEW_CELLS, compute_dims


class ComputeDimsTests(unittest.TestCase):
    def setUp(self):
        self.saved = dict(CONFIG)

    def tearDown(self):
        CONFIG.clear()
        CONFIG.update(self.saved)

    def test_default_board(self):
        CONFIG["CELL_SIZE"] = 24
        d = compute_dims(10, 20)
        self.assertEqual((d.cols, d.rows, d.cell), (10, 20, 24))
        self.assertEqual((d.board_w, d.board_h), (240, 480))
        self.assertEqual(d.panel_w, 160)
        self.assertEqual((d.total_w, d.total_h), (448, 512))
        self.assertEqual((d.board_x, d.board_y), (16, 16))
        self.assertEqual((d.panel_x, d.panel_y), (272, 16))

    def test_panel_grows_to_fit_preview(self):
        CONFIG["CELL_SIZE"] = 48
        d = compute_dims(10, 20)
        self.assertEqual(d.panel_w, 48 * PREVIEW_CELLS + 2 * d.margin)
        self.assertEqual(d.total_w, d.margin * 3 + d.board_w + d.panel_w)

    def test_board_size_from_config(self):
        CONFIG["BOARD_WIDTH"], CONFIG["BOARD_HEIGHT"] = 8, 16
        d = compute_dims()
        self.assertEqual((d.cols, d.rows), (8, 16))
        self.assertEqual(d.board_h, 16 * d.cell)


if __name__ == "__main__":
    unittest.main()
