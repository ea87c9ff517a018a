"""Closed value sets for extracted attributes.

Enum values are the Dutch literals the spreadsheet sink expects, so
``member.value`` is the wire format.
"""
from enum import Enum


UNKNOWN = "unknown"


class ProductDomain(str, Enum):
    """Product domain picked by the category classifier."""
    CABLE = "cable"
    SWITCHING = "switching"
    DISTRIBUTION = "distribution"
    LIGHTING = "lighting"
    OTHER = "other"


class CableCategory(str, Enum):
    """Cable family a detected cable type belongs to."""
    GROUND = "ground"
    INSTALLATION = "installation"
    NEOPREEN = "neopreen"
    WIRE = "wire"
    NETWORK = "network"
    AV = "av"
    HOUSEHOLD = "household"
    INDUSTRIAL = "industrial"
    LEGACY = "legacy"
    UNKNOWN = "unknown"


class NetworkCategory(str, Enum):
    """Twisted-pair network cable category."""
    CAT5 = "Cat5"
    CAT5E = "Cat5e"
    CAT6 = "Cat6"
    CAT6A = "Cat6a"
    CAT7 = "Cat7"
    CAT8 = "Cat8"


class ShieldingType(str, Enum):
    """Network cable shielding construction."""
    SFTP = "S/FTP"
    FUTP = "F/UTP"
    UUTP = "U/UTP"


class ProductType(str, Enum):
    """Kind of switching-material product."""
    SCHAKELAAR = "schakelaar"
    STOPCONTACT = "stopcontact"
    DIMMER = "dimmer"
    DRUKKNOP = "drukknop"
    FRAME = "frame"
    MODULE = "module"
    BLINDPLAAT = "blindplaat"


class SwitchType(str, Enum):
    """Switch wiring type."""
    SINGLE = "enkelpolig"
    DOUBLE = "dubbelpolig"
    CROSSOVER = "wisselschakelaar"
    INTERMEDIATE = "kruisschakelaar"
    PUSH_BUTTON = "drukknop"
    DIMMER = "dimmer"
    SERIES = "serieschakelaar"


class SocketType(str, Enum):
    """Wall socket standard."""
    SCHUKO = "schuko"
    FRENCH = "frans"
    USB = "usb"
    DATA = "data"
    PHONE = "telefoon"
    TV_SAT = "tv/sat"
