"""Tests for TraceSession loading and view state."""

import threading

import pytest

from soltree import session as session_module
from soltree.session import TraceSession
from soltree.utils.exceptions import DocumentReadError, NodeNotFoundError


@pytest.fixture
def session(config, counter_trace):
    s = TraceSession(config)
    s.load_text(counter_trace, source="counter.trace")
    return s


class TestLoading:
    def test_load_text_expands_top_level(self, session):
        assert len(session.traces) == 1
        assert session.expanded == {"trace-0"}
        assert session.highlighted == set()
        assert session.loading is False
        assert session.source == "counter.trace"

    def test_load_file(self, config, trace_file):
        s = TraceSession(config)
        assert s.load_file(trace_file) is True
        assert s.traces[0].contract_name == "Counter"
        assert s.source == str(trace_file)

    def test_load_resets_search(self, session, counter_trace):
        session.search("emit")
        session.load_text(counter_trace)
        assert session.highlighted == set()
        assert session.search_term == ''

    def test_read_failure_leaves_empty_forest(self, config, tmp_path, caplog):
        s = TraceSession(config)
        s.load_text("Traces:\nA::a()\n")
        assert s.load_file(tmp_path / "missing.trace") is True
        assert s.traces == []
        assert s.expanded == set()
        assert s.loading is False
        assert "Error parsing trace file" in caplog.text

    def test_undecodable_file(self, config, tmp_path):
        path = tmp_path / "binary.trace"
        path.write_bytes(b"Traces:\n\xff\xfe\x00")
        s = TraceSession(config)
        s.load_file(path)
        assert s.is_empty

    def test_background_load(self, config, trace_file):
        s = TraceSession(config)
        thread = s.load_file(trace_file, background=True)
        thread.join(timeout=5)
        assert not thread.is_alive()
        assert len(s.traces) == 1
        assert s.loading is False

    def test_last_started_load_wins(self, config, monkeypatch, tmp_path):
        release = threading.Event()

        def fake_read(path, config=None):
            if str(path).endswith("slow.trace"):
                release.wait(timeout=5)
                return "Traces:\nSlow::call()\n"
            return "Traces:\nFast::call()\n"

        monkeypatch.setattr(session_module, "read_document", fake_read)

        s = TraceSession(config)
        slow = s.load_file(tmp_path / "slow.trace", background=True)
        assert s.load_file(tmp_path / "fast.trace") is True
        assert s.loading is False

        release.set()
        slow.join(timeout=5)

        assert [n.contract_name for n in s.traces] == ["Fast"]
        assert s.source == str(tmp_path / "fast.trace")

    def test_stale_commit_is_discarded(self, session):
        stale = session.begin_load()
        session.load_text("Traces:\nNew::call()\n")
        assert session._commit(stale, [], None) is False
        assert session.traces[0].contract_name == "New"

    def test_begin_load_marks_loading(self, config):
        s = TraceSession(config)
        assert s.begin_load() == s.generation == 1
        assert s.loading is True


class TestViewState:
    def test_toggle(self, session):
        assert session.toggle("trace-0") is False
        assert "trace-0" not in session.expanded
        assert session.toggle("trace-0") is True
        assert "trace-0" in session.expanded

    def test_toggle_unknown_id(self, session):
        with pytest.raises(NodeNotFoundError):
            session.toggle("trace-99")

    def test_expand_and_collapse(self, session):
        session.expand("trace-3")
        assert "trace-3" in session.expanded
        session.collapse("trace-3")
        assert "trace-3" not in session.expanded

    def test_expand_all_then_collapse_all(self, session):
        session.expand_all()
        assert session.expanded == {f"trace-{i}" for i in range(7)}
        session.collapse_all()
        assert session.expanded == {"trace-0"}

    def test_visible_nodes_follow_expansion(self, session):
        visible = [node.id for node, _ in session.visible_nodes()]
        assert visible == ["trace-0", "trace-1", "trace-3", "trace-6"]
        session.collapse("trace-0")
        assert [node.id for node, _ in session.visible_nodes()] == ["trace-0"]

    def test_search_reveals_matches(self, session):
        matches = session.search("forwarded")
        assert matches == {"trace-0", "trace-3", "trace-4"}
        assert session.highlighted == matches
        assert matches <= session.expanded
        assert session.search_term == "forwarded"

    def test_blank_search_clears_highlight_only(self, session):
        session.search("forwarded")
        expanded = set(session.expanded)
        session.search("   ")
        assert session.highlighted == set()
        assert session.expanded == expanded

    def test_clear_search(self, session):
        session.search("token")
        session.clear_search()
        assert session.highlighted == set()
        assert session.search_term == ''

    def test_get_node(self, session):
        assert session.get_node("trace-4").content == "emit Forwarded(amount: 1)"


def test_read_document_errors_are_soltree_errors(config, tmp_path):
    from soltree.document_loader import read_document

    with pytest.raises(DocumentReadError):
        read_document(tmp_path, config)
