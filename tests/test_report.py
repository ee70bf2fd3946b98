from __future__ import annotations

from includer import EventKind, ReportCollector, ReportEntry


def test_emitters_keep_emission_order() -> None:
    report = ReportCollector()
    report.processed("KFM/1.xml")
    report.included("a.xml")
    report.missing("b.xml")
    report.cycle("KFM/1.xml", ("KFM/1.xml", "c.xml"))
    assert [e.kind for e in report] == [
        EventKind.PROCESSED,
        EventKind.INCLUDED,
        EventKind.MISSING_INCLUDE,
        EventKind.CYCLE_DETECTED,
    ]
    assert report.render() == [
        "Processed: KFM/1.xml",
        "Included: a.xml",
        "Missing include: b.xml",
        "Cycle detected: KFM/1.xml (KFM/1.xml -> c.xml -> KFM/1.xml)",
    ]


def test_counts_include_every_kind() -> None:
    report = ReportCollector([ReportEntry(EventKind.INCLUDED, "a"), ReportEntry(EventKind.INCLUDED, "b")])
    assert report.counts() == {
        EventKind.PROCESSED: 0,
        EventKind.INCLUDED: 2,
        EventKind.MISSING_INCLUDE: 0,
        EventKind.CYCLE_DETECTED: 0,
    }
    assert len(report.of_kind(EventKind.INCLUDED)) == 2


def test_merge_preserves_order_within_each_collector() -> None:
    first, second = ReportCollector(), ReportCollector()
    first.processed("A")
    second.processed("B")
    first.included("a1")
    second.included("b1")
    merged = ReportCollector.merge(first, second)
    assert merged.render() == ["Processed: A", "Included: a1", "Processed: B", "Included: b1"]
    assert len(first) == 2


def test_entries_is_a_copy() -> None:
    report = ReportCollector()
    report.included("x")
    report.entries.clear()
    assert len(report) == 1
