import logging
from typing import Dict

from starkware.cairo.lang.compiler.preprocessor.flow import RegTrackingData
from starkware.cairo.lang.vm.vm_core import RunContext

from cairo_uint.errors import UnknownHint
from cairo_uint.hints.decorator import implementations, normalize_hint_code
from cairo_uint.vm import HintReference

logger = logging.getLogger(__name__)


def execute_hint(
    vm: RunContext,
    code: str,
    ids_data: Dict[str, HintReference],
    ap_tracking: RegTrackingData = RegTrackingData(),
):
    """
    Run the native implementation registered for the hint source `code`.

    Errors raised by the hint are propagated unchanged.

    Raises:
        UnknownHint: if no implementation matches `code`.
    """
    hint = implementations.get(normalize_hint_code(code))
    if hint is None:
        raise UnknownHint(code)
    logger.debug(f"Executing hint {hint.__name__}")
    return hint(vm, ids_data, ap_tracking)
