from __future__ import annotations

import unittest

from shaderprep.core.models import Segment
from shaderprep.processing.provenance import TextWithProvenance


def _main_with_util() -> TextWithProvenance:
    main = TextWithProvenance("m0\n#include_once \"util\"\nm2", "main")
    main.splice_includes(1, TextWithProvenance("u0\nu1", "util"))
    return main


class SegmentTests(unittest.TestCase):
    def test_inverted_range_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Segment(3, 2, "f")

    def test_is_inside(self) -> None:
        self.assertTrue(Segment(1, 3, "a").is_inside(Segment(0, 4, "b")))
        self.assertTrue(Segment(1, 3, "a").is_inside(Segment(1, 3, "b")))
        self.assertFalse(Segment(0, 3, "a").is_inside(Segment(1, 4, "b")))

    def test_contains_is_half_open(self) -> None:
        seg = Segment(1, 3, "a")
        self.assertFalse(seg.contains(0))
        self.assertTrue(seg.contains(1))
        self.assertFalse(seg.contains(3))


class PlainTextTests(unittest.TestCase):
    def test_text_round_trip(self) -> None:
        for text in ("", "a", "a\nb", "a\n", "\n\nx\n", "trailing space \n"):
            buf = TextWithProvenance(text, "f")
            self.assertEqual(buf.text(), text)
            self.assertEqual(buf.text().split("\n"), list(buf.lines))

    def test_single_segment_identity_mapping(self) -> None:
        buf = TextWithProvenance("a\nb\nc", "f")
        self.assertEqual(buf.segments, (Segment(0, 3, "f"),))
        for i in range(3):
            self.assertEqual(buf.file_and_line_at(i), ("f", i))

    def test_out_of_range_line(self) -> None:
        buf = TextWithProvenance("a\nb", "f")
        self.assertIsNone(buf.file_and_line_at(2))
        self.assertIsNone(buf.segment_at(-1))


class SpliceTests(unittest.TestCase):
    def test_nested_provenance(self) -> None:
        buf = _main_with_util()
        self.assertEqual(buf.lines, ("m0", "u0", "u1", "m2"))
        self.assertEqual(buf.file_and_line_at(0), ("main", 0))
        self.assertEqual(buf.file_and_line_at(1), ("util", 0))
        self.assertEqual(buf.file_and_line_at(2), ("util", 1))
        self.assertEqual(buf.file_and_line_at(3), ("main", 2))

    def test_used_files(self) -> None:
        self.assertEqual(_main_with_util().all_used_files(), {"main", "util"})

    def test_segments_are_shifted_and_appended(self) -> None:
        buf = _main_with_util()
        self.assertEqual(buf.segments, (Segment(0, 4, "main"), Segment(1, 3, "util")))

    def test_parent_lookup(self) -> None:
        buf = _main_with_util()
        main_seg, util_seg = buf.segments
        self.assertEqual(buf.parent_of(util_seg), main_seg)
        self.assertIsNone(buf.parent_of(main_seg))
        self.assertEqual(buf.parent_index(1), 0)
        self.assertEqual(buf.children_indices(0), [1])

    def test_children_always_follow_parents(self) -> None:
        util = TextWithProvenance("u0\n#include_once \"deep\"", "util")
        util.splice_includes(1, TextWithProvenance("d0\nd1", "deep"))
        main = TextWithProvenance("m0\n#include_once \"util\"\nm2", "main")
        main.splice_includes(1, util)
        segs = main.segments
        for idx in range(1, len(segs)):
            parent = main.parent_index(idx)
            self.assertIsNotNone(parent)
            self.assertLess(parent, idx)
        self.assertEqual(main.lines, ("m0", "u0", "d0", "d1", "m2"))
        self.assertEqual(main.file_and_line_at(2), ("deep", 0))
        self.assertEqual(main.file_and_line_at(4), ("main", 2))
        self.assertEqual(main.file_and_line_at(1), ("util", 0))

    def test_two_siblings(self) -> None:
        main = TextWithProvenance("#include_once \"a\"\nmid\n#include_once \"b\"\nend", "main")
        main.splice_includes(0, TextWithProvenance("a0\na1\na2", "a"))
        main.splice_includes(4, TextWithProvenance("b0\nb1", "b"))
        self.assertEqual(main.lines, ("a0", "a1", "a2", "mid", "b0", "b1", "end"))
        self.assertEqual(main.file_and_line_at(3), ("main", 1))
        self.assertEqual(main.file_and_line_at(5), ("b", 1))
        self.assertEqual(main.file_and_line_at(6), ("main", 3))

    def test_all_segments_at_is_outermost_first(self) -> None:
        buf = _main_with_util()
        self.assertEqual([s.original_file for s in buf.all_segments_at(2)], ["main", "util"])
        self.assertEqual([s.original_file for s in buf.all_segments_at(3)], ["main"])

    def test_replace_line(self) -> None:
        buf = TextWithProvenance("a\nb\nc", "f")
        buf.replace_line(1, "x\ny\nz", "g")
        self.assertEqual(buf.lines, ("a", "x", "y", "z", "c"))
        self.assertEqual(buf.segments, (Segment(0, 5, "f"), Segment(1, 4, "g")))
        self.assertEqual(buf.file_and_line_at(4), ("f", 2))
        self.assertEqual(buf.file_and_line_at(2), ("g", 1))

    def test_replace_line_out_of_range(self) -> None:
        buf = TextWithProvenance("a", "f")
        with self.assertRaises(IndexError):
            buf.replace_line(3, "x", "g")

    def test_blank_line_keeps_segments(self) -> None:
        buf = TextWithProvenance("a\n#include_once \"x\"\nc", "f")
        buf.blank_line(1)
        self.assertEqual(buf.text(), "a\n\nc")
        self.assertEqual(buf.segments, (Segment(0, 3, "f"),))
        self.assertEqual(buf.file_and_line_at(2), ("f", 2))


if __name__ == "__main__":
    unittest.main()
