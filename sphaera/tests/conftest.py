import io
import logging
import datetime
import pathlib

import numpy as np
import pytest

from sphaera import DoubleEquivalence

LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport to the item so fixtures can see the outcome in teardown
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Capture the 'sphaera' logger family for each test and write it to a
    file only when the test fails.
    """
    pkg = logging.getLogger('sphaera')
    prev_handlers = list(pkg.handlers)
    for h in prev_handlers:
        pkg.removeHandler(h)

    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    pkg.addHandler(handler)
    prev_level = pkg.level
    pkg.setLevel(logging.DEBUG)

    try:
        yield
    finally:
        pkg.removeHandler(handler)
        pkg.setLevel(prev_level)
        for h in prev_handlers:
            pkg.addHandler(h)

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and getattr(rep, "outcome", None) == "failed":
            LOG_DIR.mkdir(exist_ok=True)
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n".format(request.node.nodeid))
                f.write("=== Timestamp: {}\n\n".format(ts))
                f.write(buf.getvalue())


@pytest.fixture
def precision():
    return DoubleEquivalence.of_epsilon(1e-10)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)
