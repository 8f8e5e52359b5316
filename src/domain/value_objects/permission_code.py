"""4-bit permission mask codec (view, create, update, delete).

The backend stores one integer per governed resource. Each integer packs up
to four independent capabilities:

    create = 1, update = 2, delete = 4, view = 8

Decoding is table driven: PERMISSION_LOOKUP enumerates all 16 values so the
behavior can be read (and tested) exhaustively. PermissionFlag carries the
same assignment as an IntFlag for callers that prefer masking; the two must
always agree.

Out-of-range values are clamped into 0..15, never rejected. Backend-supplied
integers must not crash a caller, and a clamped value still decodes to a
well-defined set of capabilities.

Usage:
    from src.domain.value_objects import PermissionCode
    from src.domain.enums import Action

    bits = PermissionCode.decode(9)      # view + create
    PermissionCode.encode(bits)          # 9
    PermissionCode.label(9)              # "View, Create"
    PermissionCode.has_capability(9, Action.UPDATE)  # False
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import IntFlag
from typing import Any, ClassVar

from src.domain.enums.permission import Action

MIN_PERMISSION_VALUE = 0
MAX_PERMISSION_VALUE = 15

NO_ACCESS_LABEL = "No access"
LABEL_SEPARATOR = ", "

CAPABILITY_LABELS: dict[Action, str] = {
    Action.VIEW: "View",
    Action.CREATE: "Create",
    Action.UPDATE: "Update",
    Action.DELETE: "Delete",
}


class PermissionFlag(IntFlag):
    """Bit assignment of the 4-bit mask. Fixed, not configurable."""

    CREATE = 1
    UPDATE = 2
    DELETE = 4
    VIEW = 8


@dataclass(frozen=True, slots=True)
class PermissionBits:
    """Decoded form of a 4-bit permission value.

    Supports lookup by capability: ``bits[Action.DELETE]``.
    """

    view: bool = False
    create: bool = False
    update: bool = False
    delete: bool = False

    def __getitem__(self, capability: Action | str) -> bool:
        return bool(getattr(self, Action(capability).value))

    def any(self) -> bool:
        """Check whether at least one capability is granted."""
        return any(getattr(self, f.name) for f in fields(self))


PERMISSION_LOOKUP: Mapping[int, PermissionBits] = {
    0: PermissionBits(view=False, create=False, update=False, delete=False),
    1: PermissionBits(view=False, create=True, update=False, delete=False),
    2: PermissionBits(view=False, create=False, update=True, delete=False),
    3: PermissionBits(view=False, create=True, update=True, delete=False),
    4: PermissionBits(view=False, create=False, update=False, delete=True),
    5: PermissionBits(view=False, create=True, update=False, delete=True),
    6: PermissionBits(view=False, create=False, update=True, delete=True),
    7: PermissionBits(view=False, create=True, update=True, delete=True),
    8: PermissionBits(view=True, create=False, update=False, delete=False),
    9: PermissionBits(view=True, create=True, update=False, delete=False),
    10: PermissionBits(view=True, create=False, update=True, delete=False),
    11: PermissionBits(view=True, create=True, update=True, delete=False),
    12: PermissionBits(view=True, create=False, update=False, delete=True),
    13: PermissionBits(view=True, create=True, update=False, delete=True),
    14: PermissionBits(view=True, create=False, update=True, delete=True),
    15: PermissionBits(view=True, create=True, update=True, delete=True),
}


class MaskCodec:
    """Table-driven codec shared by the 4-bit and 3-bit permission masks.

    Subclasses provide the lookup table, the bits type, the flag for each
    capability (in label order), and the maximum value. All methods are
    pure class methods; codecs are never instantiated.
    """

    MIN_VALUE: ClassVar[int] = MIN_PERMISSION_VALUE
    MAX_VALUE: ClassVar[int]
    LOOKUP: ClassVar[Mapping[int, Any]]
    CAPABILITY_FLAGS: ClassVar[Mapping[Action, int]]

    @classmethod
    def clamp(cls, value: int) -> int:
        """Force a raw value into the representable range.

        Args:
            value: Any integer (negative and oversized values included).

        Returns:
            int: ``max(MIN_VALUE, min(MAX_VALUE, value))``.
        """
        return max(cls.MIN_VALUE, min(cls.MAX_VALUE, int(value)))

    @classmethod
    def decode(cls, value: int):
        """Decode a raw value into its capability bits. Never raises."""
        return cls.LOOKUP[cls.clamp(value)]

    @classmethod
    def encode(cls, bits) -> int:
        """Encode capability bits back into an integer.

        Inverse of decode: ``decode(encode(b)) == b`` and
        ``encode(decode(v)) == clamp(v)``.
        """
        return sum(
            flag
            for capability, flag in cls.CAPABILITY_FLAGS.items()
            if getattr(bits, capability.value)
        )

    @classmethod
    def has_capability(cls, value: int, capability: Action | str) -> bool:
        """Check a single capability of a raw value.

        Capabilities the mask does not carry are never granted.

        Args:
            value: Raw permission value.
            capability: Action to check.

        Returns:
            bool: True if the decoded bits grant the capability.
        """
        action = Action(capability)
        if action not in cls.CAPABILITY_FLAGS:
            return False
        return cls.decode(value)[action]

    @classmethod
    def label(
        cls,
        value: int,
        *,
        none_label: str = NO_ACCESS_LABEL,
        separator: str = LABEL_SEPARATOR,
    ) -> str:
        """Describe a raw value for display.

        Args:
            value: Raw permission value.
            none_label: Text returned when no capability is granted.
            separator: Text placed between capability names.

        Returns:
            str: ``none_label`` for zero, otherwise the granted capability
            names in view, create, update, delete order.
        """
        bits = cls.decode(value)
        names = [
            CAPABILITY_LABELS[capability]
            for capability in cls.CAPABILITY_FLAGS
            if bits[capability]
        ]
        if not names:
            return none_label
        return separator.join(names)

    @classmethod
    def add_flag(cls, value: int, flag: int) -> int:
        """Grant a capability. Result is clamped."""
        return cls.clamp(cls.clamp(value) | int(flag))

    @classmethod
    def remove_flag(cls, value: int, flag: int) -> int:
        """Revoke a capability. Result is clamped."""
        return cls.clamp(cls.clamp(value) & ~int(flag))

    @classmethod
    def toggle_flag(cls, value: int, flag: int) -> int:
        """Flip a capability. Result is clamped."""
        return cls.clamp(cls.clamp(value) ^ int(flag))


class PermissionCode(MaskCodec):
    """Codec for the 4-bit view/create/update/delete mask (values 0..15)."""

    MAX_VALUE = MAX_PERMISSION_VALUE
    LOOKUP = PERMISSION_LOOKUP
    CAPABILITY_FLAGS = {
        Action.VIEW: PermissionFlag.VIEW,
        Action.CREATE: PermissionFlag.CREATE,
        Action.UPDATE: PermissionFlag.UPDATE,
        Action.DELETE: PermissionFlag.DELETE,
    }

    @classmethod
    def decode(cls, value: int) -> PermissionBits:
        """Decode a raw value into view/create/update/delete bits.

        Args:
            value: Raw permission value; clamped into 0..15 first.

        Returns:
            PermissionBits: Entry of PERMISSION_LOOKUP for the clamped value.

        Example:
            >>> PermissionCode.decode(9)
            PermissionBits(view=True, create=True, update=False, delete=False)
            >>> PermissionCode.decode(99) == PermissionCode.decode(15)
            True
        """
        return cls.LOOKUP[cls.clamp(value)]

    @classmethod
    def encode(cls, bits: PermissionBits) -> int:
        """Encode bits as ``view*8 + create*1 + update*2 + delete*4``.

        Example:
            >>> PermissionCode.encode(PermissionBits(view=True))
            8
        """
        return super().encode(bits)
