# topmark:header:start
#
#   project      : PipeSeq
#   file         : test_ordering_property.py
#   file_relpath : tests/pipeline/test_ordering_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for report ordering and pipeline independence."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from pipeseq.config import Policy
from pipeseq.pipeline import AdmissionOutcome, ChannelTable
from tests.conftest import make_record

u8 = st.integers(min_value=0, max_value=255)


@settings(max_examples=100, deadline=None)
@given(ids=st.lists(u8, max_size=40))
def test_unconstrained_records_drain_sorted(ids: list[int]) -> None:
    """Under the default policy every record is admitted and drained in id order."""
    table = ChannelTable()
    for i, record_id in enumerate(ids):
        table.admit(make_record(0, record_id, str(i), record_id))

    reports = table.render()
    if not ids:
        assert reports == []
        return
    assert reports[0].ids == sorted(ids)


@settings(max_examples=100, deadline=None)
@given(ids=st.permutations(list(range(12))))
def test_reverse_chain_in_any_arrival_order(ids: list[int]) -> None:
    """A pipeline accepting everything reports ids ascending regardless of arrival."""
    table = ChannelTable(Policy(discard_invalid_sequence=False))
    for record_id in ids:
        table.admit(make_record(3, record_id, f"r{record_id}", 255))

    (report,) = table.render()
    assert report.ids == list(range(12))
    assert [line.body for line in report.lines] == [f"r{i}".encode() for i in range(12)]


@settings(max_examples=100, deadline=None)
@given(
    first=st.lists(st.tuples(u8, st.one_of(st.none(), u8)), max_size=20),
    second=st.lists(st.tuples(u8, st.one_of(st.none(), u8)), max_size=20),
    discard=st.booleans(),
)
def test_pipelines_are_independent(
    first: list[tuple[int, int | None]],
    second: list[tuple[int, int | None]],
    discard: bool,
) -> None:
    """Interleaving another pipeline never changes a pipeline's outcomes."""
    policy = Policy(discard_invalid_sequence=discard)

    alone = ChannelTable(policy)
    alone_outcomes: list[AdmissionOutcome] = [
        alone.admit(make_record(1, rid, "x", nxt)) for rid, nxt in first
    ]

    mixed = ChannelTable(policy)
    mixed_outcomes: list[AdmissionOutcome] = []
    for i in range(max(len(first), len(second))):
        if i < len(second):
            mixed.admit(make_record(2, second[i][0], "y", second[i][1]))
        if i < len(first):
            mixed_outcomes.append(mixed.admit(make_record(1, first[i][0], "x", first[i][1])))

    assert mixed_outcomes == alone_outcomes
    alone_ids = [r.ids for r in alone.render() if r.channel_id == 1]
    mixed_ids = [r.ids for r in mixed.render() if r.channel_id == 1]
    assert mixed_ids == alone_ids
