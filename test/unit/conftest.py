"""Shared fixtures for soltree unit tests."""

import logging
from pathlib import Path

import pytest

from soltree.config import ViewerConfig
from soltree.utils.colors import set_color_enabled

INPUTS_DIR = Path(__file__).resolve().parent.parent / "Inputs"

COUNTER_TRACE = """\
Traces:
  [24367] Counter::increment()
    ├─ [2261] Token::balanceOf(0x7FA9385bE102ac3EAc297483Dd6233D62b3e1496) [staticcall]
    │   └─ ← [Return] 100
    ├─ [5000] Proxy::forward(0xabc123) [delegatecall]
    │   ├─ emit Forwarded(amount: 1)
    │   └─ ← [Stop]
    └─ ← [Stop]
"""


@pytest.fixture(autouse=True)
def no_colors():
    set_color_enabled(False)
    yield
    set_color_enabled(False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging so caplog sees soltree records."""
    yield
    log = logging.getLogger("soltree")
    for handler in list(log.handlers):
        handler.close()
    log.handlers.clear()
    log.setLevel(logging.NOTSET)
    log.propagate = True


@pytest.fixture
def config():
    return ViewerConfig(use_colors=False)


@pytest.fixture
def counter_trace():
    return COUNTER_TRACE


@pytest.fixture
def inputs_dir():
    return INPUTS_DIR


@pytest.fixture
def trace_file(tmp_path, counter_trace):
    path = tmp_path / "counter.trace"
    path.write_text(counter_trace, encoding="utf-8")
    return path
