"""
Memory access used by native hints.

Hints receive the VM's `RunContext` (memory and registers), the `ids_data` mapping of the
hint's accessible variables to `HintReference`s, and the ap tracking of the instruction the
hint is attached to.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from starkware.cairo.lang.compiler.instruction import Register
from starkware.cairo.lang.compiler.preprocessor.flow import RegTrackingData
from starkware.cairo.lang.compiler.preprocessor.reg_tracking import RegChangeKnown
from starkware.cairo.lang.vm.relocatable import RelocatableValue
from starkware.cairo.lang.vm.vm_core import RunContext

from cairo_uint.errors import MemoryReadError, UnknownIdentifier


@dataclass(frozen=True)
class HintReference:
    """
    Location of a hint variable, relative to one of the VM registers.

    ap-based references only resolve when the current ap tracking belongs to the same
    group as the reference. When `dereference` is set, the cell at the computed address
    holds a pointer to the variable rather than the variable itself.
    """

    offset: int
    register: Register = Register.FP
    ap_tracking: Optional[RegTrackingData] = None
    dereference: bool = False


def compute_addr_from_reference(
    reference: HintReference, vm: RunContext, ap_tracking: RegTrackingData
) -> Optional[RelocatableValue]:
    if reference.register is Register.FP:
        addr = vm.fp + reference.offset
    else:
        if reference.ap_tracking is None:
            return None
        ap_change = ap_tracking - reference.ap_tracking
        if not isinstance(ap_change, RegChangeKnown):
            return None
        addr = vm.ap + (reference.offset - ap_change.value)

    if addr.offset < 0:
        return None

    if reference.dereference:
        addr = vm.memory.get(addr)
        if not isinstance(addr, RelocatableValue):
            return None

    return addr


def get_relocatable_from_var_name(
    name: str,
    vm: RunContext,
    ids_data: Dict[str, HintReference],
    ap_tracking: RegTrackingData,
) -> RelocatableValue:
    reference = ids_data.get(name)
    if reference is None:
        raise UnknownIdentifier(name)
    addr = compute_addr_from_reference(reference, vm, ap_tracking)
    if addr is None:
        raise UnknownIdentifier(name)
    return addr


def get_integer(vm: RunContext, addr: RelocatableValue) -> int:
    value = vm.memory.get(addr)
    if not isinstance(value, int):
        raise MemoryReadError(addr)
    return value


def insert_value(vm: RunContext, addr: RelocatableValue, value: int):
    # Raises InconsistentMemoryError if the cell already holds another value
    vm.memory[addr] = value % vm.prime
