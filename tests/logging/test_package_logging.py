"""Tests for the package logging configuration and engine log output."""

import logging
from io import StringIO

import pytest

from routegraph.algorithms.spf import shortest_path
from routegraph.generate import polygon_graph
from routegraph.model.graph import Graph
from routegraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset(clean_logging):
    yield


def _capture(logger: logging.Logger) -> StringIO:
    buf = StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)
    return buf


def test_default_level_is_info_and_debug_toggles():
    logger = get_logger("routegraph.test")
    buf = _capture(logger)

    logger.info("visible")
    logger.debug("hidden")
    assert "visible" in buf.getvalue()
    assert "hidden" not in buf.getvalue()

    enable_debug_logging()
    logger.debug("now-visible")
    assert "now-visible" in buf.getvalue()

    disable_debug_logging()
    logger.debug("hidden-again")
    assert "hidden-again" not in buf.getvalue()


def test_children_inherit_global_level():
    first = get_logger("routegraph.algorithms.spf")
    assert first.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.ERROR)
    assert first.getEffectiveLevel() == logging.ERROR
    assert get_logger("routegraph.render").getEffectiveLevel() == logging.ERROR


def test_setup_is_idempotent():
    root = logging.getLogger("routegraph")
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    assert len(root.handlers) == 1
    setup_root_logger(level=logging.DEBUG)
    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_custom_format():
    buf = StringIO()
    setup_root_logger(
        format_string="%(levelname)s|%(name)s|%(message)s",
        handler=logging.StreamHandler(buf),
    )
    get_logger("routegraph.fmt").warning("hello")
    assert "WARNING|routegraph.fmt|hello" in buf.getvalue()


def test_graph_build_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="routegraph"):
        polygon_graph(4)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Built graph with 4 nodes and 4 edges" in m for m in messages)
    assert any("4-sided polygon" in m for m in messages)


def test_internal_error_is_logged(caplog, tri_graph, monkeypatch):
    def broken(self, _node_id):
        raise TypeError("bad neighbor")

    monkeypatch.setattr(Graph, "neighbors", broken)
    with caplog.at_level(logging.ERROR, logger="routegraph"):
        shortest_path(tri_graph, "a", "b")
    assert any(
        r.levelno == logging.ERROR and "bad neighbor" in r.getMessage()
        for r in caplog.records
    )
