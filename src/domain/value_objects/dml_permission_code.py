"""3-bit DML permission mask codec (create, update, delete).

Cases and tasks split their permissions in two: a view field (presence test,
see Resource.uses_dml_mask) and a data-manipulation mask with no view bit.
The DML mask reuses the create/update/delete assignment of the 4-bit mask:

    create = 1, update = 2, delete = 4

Values are clamped into 0..7.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntFlag

from src.domain.enums.permission import Action
from src.domain.value_objects.permission_code import MaskCodec


class DmlFlag(IntFlag):
    """Bit assignment of the DML mask."""

    CREATE = 1
    UPDATE = 2
    DELETE = 4


@dataclass(frozen=True, slots=True)
class DmlPermissionBits:
    """Decoded form of a DML permission value. Has no view field."""

    create: bool = False
    update: bool = False
    delete: bool = False

    def __getitem__(self, capability: Action | str) -> bool:
        action = Action(capability)
        if action is Action.VIEW:
            raise KeyError("DML permission bits carry no view capability")
        return bool(getattr(self, action.value))

    def any(self) -> bool:
        """Check whether at least one capability is granted."""
        return self.create or self.update or self.delete


DML_PERMISSION_LOOKUP: Mapping[int, DmlPermissionBits] = {
    0: DmlPermissionBits(create=False, update=False, delete=False),
    1: DmlPermissionBits(create=True, update=False, delete=False),
    2: DmlPermissionBits(create=False, update=True, delete=False),
    3: DmlPermissionBits(create=True, update=True, delete=False),
    4: DmlPermissionBits(create=False, update=False, delete=True),
    5: DmlPermissionBits(create=True, update=False, delete=True),
    6: DmlPermissionBits(create=False, update=True, delete=True),
    7: DmlPermissionBits(create=True, update=True, delete=True),
}


class DmlPermissionCode(MaskCodec):
    """Codec for the 3-bit create/update/delete mask (values 0..7)."""

    MAX_VALUE = 7
    LOOKUP = DML_PERMISSION_LOOKUP
    CAPABILITY_FLAGS = {
        Action.CREATE: DmlFlag.CREATE,
        Action.UPDATE: DmlFlag.UPDATE,
        Action.DELETE: DmlFlag.DELETE,
    }

    @classmethod
    def decode(cls, value: int) -> DmlPermissionBits:
        """Decode a raw value into create/update/delete bits.

        Args:
            value: Raw DML value; clamped into 0..7 first.

        Returns:
            DmlPermissionBits: Entry of DML_PERMISSION_LOOKUP.
        """
        return cls.LOOKUP[cls.clamp(value)]

    @classmethod
    def encode(cls, bits: DmlPermissionBits) -> int:
        """Encode bits as ``create*1 + update*2 + delete*4``."""
        return super().encode(bits)
