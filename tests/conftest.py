import logging

import pytest
from starkware.cairo.lang.compiler.preprocessor.flow import RegTrackingData

from cairo_uint.hints import execute_hint
from cairo_uint.testing.hints import make_segments, make_vm

logger = logging.getLogger("TRACE")


@pytest.fixture
def segments():
    return make_segments()


@pytest.fixture
def vm(segments):
    return make_vm(segments)


@pytest.fixture(scope="session")
def run_hint():
    def _factory(vm, ids_data, code, ap_tracking=RegTrackingData()):
        logger.trace_hint(
            f"fp={vm.fp} ap={vm.ap} ids={ {k: v.offset for k, v in ids_data.items()} }"
        )
        return execute_hint(vm, code, ids_data, ap_tracking)

    return _factory
