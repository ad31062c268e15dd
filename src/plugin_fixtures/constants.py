"""Protocol return codes shared by the host server and its plugins."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ReturnCode(IntEnum):
    """Codes a hook passes to ``next()`` to steer the host server."""

    CONT = 900
    STOP = 901
    DENY = 902
    DENYSOFT = 903
    DENYDISCONNECT = 904
    DISCONNECT = 905
    OK = 906
    NEXT_HOOK = 907
    DELAY = 908
    DENYSOFTDISCONNECT = 909


CONT = ReturnCode.CONT
STOP = ReturnCode.STOP
DENY = ReturnCode.DENY
DENYSOFT = ReturnCode.DENYSOFT
DENYDISCONNECT = ReturnCode.DENYDISCONNECT
DISCONNECT = ReturnCode.DISCONNECT
OK = ReturnCode.OK
NEXT_HOOK = ReturnCode.NEXT_HOOK
DELAY = ReturnCode.DELAY
DENYSOFTDISCONNECT = ReturnCode.DENYSOFTDISCONNECT


def as_bindings() -> dict[str, int]:
    """Return the constants as plain ``name -> int`` bindings."""
    return {code.name: int(code) for code in ReturnCode}


def import_into(target: Any) -> Any:
    """Inject every constant into ``target``.

    Dicts (such as a sandbox namespace) get keys, anything else gets
    attributes. The target is returned for chaining.
    """
    bindings = as_bindings()
    if isinstance(target, dict):
        target.update(bindings)
    else:
        for name, value in bindings.items():
            setattr(target, name, value)
    return target


def translate(code: int) -> str:
    """Translate a numeric code back to its name."""
    try:
        return ReturnCode(code).name
    except ValueError:
        return str(code)
