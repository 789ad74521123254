"""
ASCII control code mnemonics used by the readable byte renderer.

Each code carries a leading pad so rendered columns roughly line up at
four characters per byte.
"""

import enum


class ControlCode(enum.IntEnum):
    """Mnemonics for bytes 0x00-0x20 and 0x7F."""
    NUL = 0x00
    SOH = 0x01
    STX = 0x02
    ETX = 0x03
    EOT = 0x04
    ENQ = 0x05
    ACK = 0x06
    BEL = 0x07
    BS = 0x08
    HT = 0x09
    LF = 0x0A
    VT = 0x0B
    FF = 0x0C
    CR = 0x0D
    SO = 0x0E
    SI = 0x0F
    DLE = 0x10
    DC1 = 0x11
    DC2 = 0x12
    DC3 = 0x13
    DC4 = 0x14
    NAK = 0x15
    SYN = 0x16
    ETB = 0x17
    CAN = 0x18
    EM = 0x19
    SUB = 0x1A
    ESC = 0x1B
    FS = 0x1C
    GS = 0x1D
    RS = 0x1E
    US = 0x1F
    SPC = 0x20
    DEL = 0x7F


# VT is one space short of the others; existing dumps depend on it.
PADDING = {
    ControlCode.NUL: " ",
    ControlCode.SOH: " ",
    ControlCode.STX: " ",
    ControlCode.ETX: " ",
    ControlCode.EOT: " ",
    ControlCode.ENQ: " ",
    ControlCode.ACK: " ",
    ControlCode.BEL: " ",
    ControlCode.BS: "  ",
    ControlCode.HT: "  ",
    ControlCode.LF: "  ",
    ControlCode.VT: " ",
    ControlCode.FF: "  ",
    ControlCode.CR: "  ",
    ControlCode.SO: "  ",
    ControlCode.SI: "  ",
    ControlCode.DLE: " ",
    ControlCode.DC1: " ",
    ControlCode.DC2: " ",
    ControlCode.DC3: " ",
    ControlCode.DC4: " ",
    ControlCode.NAK: " ",
    ControlCode.SYN: " ",
    ControlCode.ETB: " ",
    ControlCode.CAN: " ",
    ControlCode.EM: "  ",
    ControlCode.SUB: " ",
    ControlCode.ESC: " ",
    ControlCode.FS: "  ",
    ControlCode.GS: "  ",
    ControlCode.RS: "  ",
    ControlCode.US: "  ",
    ControlCode.SPC: " ",
    ControlCode.DEL: " ",
}

PRINTABLE_PADDING = "   "


def label_of(value: int) -> tuple[str, str]:
    """Return (pad, label) for a single byte value."""
    try:
        code = ControlCode(value)
    except ValueError:
        return PRINTABLE_PADDING, chr(value)
    return PADDING[code], code.name
