# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Value Representation (VR) configuration."""

from enum import Enum, unique


@unique
class VR(str, Enum):
    """DICOM Data Element's Value Representation (VR)"""
    # Standard VRs recognised by the scanner
    AE = "AE"
    AS = "AS"
    AT = "AT"
    CS = "CS"
    DA = "DA"
    DS = "DS"
    DT = "DT"
    FD = "FD"
    FL = "FL"
    IS = "IS"
    LO = "LO"
    LT = "LT"
    OB = "OB"
    OW = "OW"
    PN = "PN"
    SH = "SH"
    SL = "SL"
    SQ = "SQ"
    SS = "SS"
    ST = "ST"
    TM = "TM"
    UI = "UI"
    UL = "UL"
    UN = "UN"
    US = "US"
    UT = "UT"
    # Non-standard codes written by some generators
    QQ = "??"
    RT = "RT"
    # Dictionary only: 'OB or OW' for Pixel Data, and the delimiters
    OX = "OX"
    DL = "DL"
    # No VR in the stream and none found in the dictionary
    IMPLICIT = "--"

    def __str__(self) -> str:
        return str.__str__(self)


# Explicit VRs followed by 2 reserved bytes and a 4-byte length
extra_length_VRs = {VR.OB, VR.OW, VR.SQ, VR.UN, VR.UT}

# Explicit VRs with a 2-byte length
short_length_VRs = {
    VR.AE, VR.AS, VR.AT, VR.CS, VR.DA, VR.DS, VR.DT, VR.FD, VR.FL, VR.IS,
    VR.LO, VR.LT, VR.PN, VR.SH, VR.SL, VR.SS, VR.ST, VR.TM, VR.UI, VR.UL,
    VR.US, VR.QQ, VR.RT,
}

# VRs whose values are listed as ASCII text
text_VRs = {
    VR.AE, VR.AS, VR.AT, VR.CS, VR.DA, VR.DS, VR.DT, VR.IS, VR.LO, VR.LT,
    VR.PN, VR.SH, VR.ST, VR.TM, VR.UI,
}

# Binary floating point VRs, skipped in the listing
float_VRs = {VR.FD, VR.FL}


def vr_from_bytes(vr_bytes: bytes) -> "VR":
    """Return the :class:`VR` for the 2 bytes that follow a tag, or
    ``VR.IMPLICIT`` if they don't form one of the recognised codes.
    """
    try:
        return VR(vr_bytes.decode('ascii'))
    except (UnicodeDecodeError, ValueError):
        return VR.IMPLICIT
