import pytest

from record_framer import FramerState, RecordFramer
from track_errors import HeaderParseError

from conftest import numbered


def feed_all(framer, lines):
    closed = []
    for number, line in lines:
        block = framer.feed(number, line)
        if block is not None:
            closed.append(block)
    tail = framer.finish()
    if tail is not None:
        closed.append(tail)
    return closed


def test_groups_data_lines_under_qualifying_headers(sample_text):
    blocks = feed_all(RecordFramer(2009), numbered(sample_text))
    assert [b.name for b in blocks] == ["ANDRES", "LANA"]
    andres, lana = blocks
    assert andres.header_line_number == 1
    assert andres.collected_count == andres.expected_data_line_count == 3
    assert lana.header_line_number == 8
    assert lana.data_lines[1].startswith("20090730, 0600")


def test_other_years_are_counted_but_not_collected(sample_text):
    ignored = []
    framer = RecordFramer(2008, on_ignored=ignored.append)
    blocks = feed_all(framer, numbered(sample_text))
    assert [b.name for b in blocks] == ["BORIS"]
    assert [(h.name, h.year) for h in ignored] == [("ANDRES", 2009), ("LANA", 2009)]


def test_declared_count_is_trusted_over_content():
    # the second line looks like a header but is consumed as data
    text = "EP012010, FOO, 1,\nEP022010, BAR, 0,\nEP032009, BAZ, 0,\n"
    blocks = feed_all(RecordFramer(2009), numbered(text))
    assert [b.name for b in blocks] == ["BAZ"]


def test_lines_of_ignored_blocks_are_never_validated():
    text = "EP012010, FOO, 2,\ngarbage\nmore garbage\nEP022009, BAR, 0,\n"
    blocks = feed_all(RecordFramer(2009), numbered(text))
    assert [b.name for b in blocks] == ["BAR"]


def test_zero_count_block_closes_on_its_header_line():
    framer = RecordFramer(2009)
    block = framer.feed(1, "EP012009, EMPTY, 0,")
    assert block is not None
    assert block.data_lines == []
    assert framer.state is FramerState.AWAITING_HEADER


def test_state_transitions():
    framer = RecordFramer(2009)
    assert framer.state is FramerState.AWAITING_HEADER
    assert framer.feed(1, "EP012009, ANDRES, 2,") is None
    assert framer.state is FramerState.IN_BLOCK
    assert framer.remaining == 2
    assert framer.feed(2, "line a") is None
    assert framer.remaining == 1
    block = framer.feed(3, "line b")
    assert block is not None and block.data_lines == ["line a", "line b"]
    assert framer.state is FramerState.AWAITING_HEADER
    assert framer.remaining == 0


def test_truncated_block_is_handed_over_at_end_of_input():
    framer = RecordFramer(2009)
    framer.feed(1, "EP012009, ANDRES, 3,")
    framer.feed(2, "20090621, 0000,  , TD, 14.5N, 100.5W,  30,")
    block = framer.finish()
    assert block is not None
    assert block.expected_data_line_count == 3
    assert block.collected_count == 1
    assert framer.finish() is None


def test_truncated_block_of_other_year_is_dropped():
    framer = RecordFramer(2009)
    framer.feed(1, "EP012010, ANDRES, 3,")
    assert framer.finish() is None


def test_header_mismatch_raises_with_line_number():
    framer = RecordFramer(2009)
    framer.feed(1, "EP012009, ANDRES, 0,")
    with pytest.raises(HeaderParseError) as excinfo:
        framer.feed(2, "AL012009, ALPHA, 3")
    assert excinfo.value.line_number == 2
    assert excinfo.value.line == "AL012009, ALPHA, 3"
    assert excinfo.value.location == "header"


def test_ignored_block_lines_are_counted_without_collecting():
    framer = RecordFramer(2009)
    framer.feed(1, "EP012010, FOO, 2,")
    assert framer.feed(2, "x") is None
    assert framer.remaining == 1
    assert framer.feed(3, "y") is None
    assert framer.state is FramerState.AWAITING_HEADER
