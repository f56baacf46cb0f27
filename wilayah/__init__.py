from wilayah.emit import EmitError
from wilayah.records import (
    District,
    ParseError,
    Province,
    Regency,
    Village,
    WilayahError,
)

__all__ = [
    "District",
    "EmitError",
    "ParseError",
    "Province",
    "Regency",
    "Village",
    "WilayahError",
]
