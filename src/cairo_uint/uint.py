"""
Wide unsigned integers stored in Cairo memory as consecutive field element limbs.

Limb `i` of a value contributes `limb << (i * num_bits_shift)`. The uint384 extension
library uses 128-bit limbs: `Uint384` is three of them, `Uint768` six.
"""

from dataclasses import astuple, dataclass, fields
from typing import ClassVar, Dict, Sequence, Tuple, Union

from starkware.cairo.lang.compiler.preprocessor.flow import RegTrackingData
from starkware.cairo.lang.vm.relocatable import RelocatableValue
from starkware.cairo.lang.vm.vm_core import RunContext

from cairo_uint.config import HintConfig
from cairo_uint.errors import IdentifierHasNoMember, MemoryReadError
from cairo_uint.vm import HintReference, get_integer, get_relocatable_from_var_name


class BigIntLimbs:
    """Base class of the fixed-size limb structs, one dataclass field per limb."""

    N_LIMBS: ClassVar[int]

    @property
    def limbs(self) -> Tuple[int, ...]:
        return astuple(self)

    @classmethod
    def from_base_addr(cls, vm: RunContext, addr: RelocatableValue, name: str):
        """
        Read the struct's limbs from `addr` onwards, in limb order.

        Raises:
            IdentifierHasNoMember: for the first limb whose cell is missing or holds a
                relocatable, naming `name` and that limb.
        """
        limbs = []
        for i, member in enumerate(fields(cls)):
            try:
                limbs.append(get_integer(vm, addr + i))
            except MemoryReadError as e:
                raise IdentifierHasNoMember(name, member.name) from e
        return cls(*limbs)

    @classmethod
    def from_var_name(
        cls,
        name: str,
        vm: RunContext,
        ids_data: Dict[str, HintReference],
        ap_tracking: RegTrackingData,
    ):
        base_addr = get_relocatable_from_var_name(name, vm, ids_data, ap_tracking)
        return cls.from_base_addr(vm, base_addr, name)

    @classmethod
    def from_int(cls, value: int, num_bits_shift: int = HintConfig.NUM_BITS_SHIFT):
        return cls(*split(value, num_bits_shift, cls.N_LIMBS))

    def value(self, num_bits_shift: int = HintConfig.NUM_BITS_SHIFT) -> int:
        return pack(self, num_bits_shift)


@dataclass(frozen=True)
class Uint384(BigIntLimbs):
    N_LIMBS: ClassVar[int] = HintConfig.UINT384_N_LIMBS

    d0: int
    d1: int
    d2: int


@dataclass(frozen=True)
class Uint768(BigIntLimbs):
    N_LIMBS: ClassVar[int] = HintConfig.UINT768_N_LIMBS

    d0: int
    d1: int
    d2: int
    d3: int
    d4: int
    d5: int


def pack(z: Union[BigIntLimbs, Sequence[int]], num_bits_shift: int) -> int:
    limbs = z.limbs if isinstance(z, BigIntLimbs) else z
    return sum(limb << (num_bits_shift * i) for i, limb in enumerate(limbs))


def split(num: int, num_bits_shift: int, length: int) -> Tuple[int, ...]:
    """
    Little-endian decomposition of `num` into exactly `length` limbs.

    Bits above `num_bits_shift * length` are dropped; callers are expected to pass a
    value that fits.
    """
    a = []
    for _ in range(length):
        a.append(num & ((1 << num_bits_shift) - 1))
        num = num >> num_bits_shift
    return tuple(a)
