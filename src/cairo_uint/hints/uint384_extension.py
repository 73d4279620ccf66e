import logging
from typing import Dict

from starkware.cairo.lang.compiler.preprocessor.flow import RegTrackingData
from starkware.cairo.lang.vm.vm_core import RunContext

from cairo_uint.config import HintConfig
from cairo_uint.errors import DividedByZero
from cairo_uint.hints.decorator import register_hint
from cairo_uint.hints.hint_code import UNSIGNED_DIV_REM_UINT768_BY_UINT384
from cairo_uint.uint import Uint384, Uint768, split
from cairo_uint.vm import (
    HintReference,
    get_relocatable_from_var_name,
    insert_value,
)

logger = logging.getLogger(__name__)


@register_hint(UNSIGNED_DIV_REM_UINT768_BY_UINT384)
def unsigned_div_rem_uint768_by_uint384(
    vm: RunContext,
    ids_data: Dict[str, HintReference],
    ap_tracking: RegTrackingData,
):
    """
    Floor division of the Uint768 `a` by the Uint384 `div`.

    Writes the quotient as a Uint768 at `quotient` and the remainder as a Uint384 at
    `remainder`. Nothing is written when `div` is zero.
    """
    num_bits_shift = HintConfig.NUM_BITS_SHIFT

    a = Uint768.from_var_name("a", vm, ids_data, ap_tracking).value(num_bits_shift)
    div = Uint384.from_var_name("div", vm, ids_data, ap_tracking).value(
        num_bits_shift
    )
    quotient_addr = get_relocatable_from_var_name(
        "quotient", vm, ids_data, ap_tracking
    )
    remainder_addr = get_relocatable_from_var_name(
        "remainder", vm, ids_data, ap_tracking
    )
    if div == 0:
        raise DividedByZero()

    quotient, remainder = divmod(a, div)
    logger.debug(f"uint768 divmod: {a} = {quotient} * {div} + {remainder}")

    if quotient >> (num_bits_shift * HintConfig.UINT768_N_LIMBS):
        # Only reachable with limbs wider than num_bits_shift
        logger.warning(f"Quotient {quotient} does not fit in a Uint768, truncating")

    # Writes are not rolled back: on InconsistentMemoryError the limbs written before
    # the conflicting cell stay in memory
    quotient_split = split(quotient, num_bits_shift, HintConfig.UINT768_N_LIMBS)
    for i, limb in enumerate(quotient_split):
        insert_value(vm, quotient_addr + i, limb)

    remainder_split = split(remainder, num_bits_shift, HintConfig.UINT384_N_LIMBS)
    for i, limb in enumerate(remainder_split):
        insert_value(vm, remainder_addr + i, limb)
