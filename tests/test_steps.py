from __future__ import annotations

from models import MergeResult
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import AdvancePage, PageBreak, PersistConnections

from fakes import FakeNavigator, RecordingPacer, person


class _Store:
    def __init__(self):
        self.calls = []

    def merge_discovered(self, discovered, source_profile, page_number):
        self.calls.append((len(discovered), source_profile, page_number))
        return MergeResult(new_count=len(discovered) - 1, duplicate_count=1)


class _Driver:
    def __init__(self, can_advance):
        self.can_advance = can_advance
        self.page_number = 1

    def advance(self):
        if self.can_advance:
            self.page_number += 1
        return self.can_advance


def test_persist_connections_adds_counts_to_report():
    store = _Store()
    ctx = RunContext(source_profile="src", page_number=4, discovered=[person("a"), person("b"), person("c")])
    out = PersistConnections(store).run(ctx)
    assert store.calls == [(3, "src", 4)]
    assert (out.report.new_connections, out.report.duplicates) == (2, 1)


def test_persist_skips_empty_batches():
    store = _Store()
    PersistConnections(store).run(RunContext())
    assert store.calls == []


def test_page_break_only_after_first_page():
    pacer = RecordingPacer()
    step = PageBreak(pacer, FakeNavigator())
    step.run(RunContext(page_number=1))
    assert pacer.events == []
    step.run(RunContext(page_number=2))
    assert pacer.events == ["page_break"]


def test_advance_page_counts_and_stops():
    ctx = Pipeline([AdvancePage(_Driver(True))]).run(RunContext())
    assert (ctx.page_number, ctx.report.pages_processed, ctx.exhausted) == (2, 1, False)

    ctx = Pipeline([AdvancePage(_Driver(False))]).run(RunContext())
    assert (ctx.page_number, ctx.report.pages_processed, ctx.exhausted) == (1, 1, True)


def test_exhausted_context_skips_every_step():
    store = _Store()
    pacer = RecordingPacer()
    ctx = RunContext(page_number=3, discovered=[person("a")], exhausted=True)
    Pipeline([PersistConnections(store), PageBreak(pacer, FakeNavigator()), AdvancePage(_Driver(True))]).run(ctx)
    assert store.calls == [] and pacer.events == []
    assert ctx.report.pages_processed == 0
