"""SKU codec for Team Fortress 2 items.

    >>> from tf2_sku import Sku, KillstreakTier, Quality
    >>> sku = Sku.from_string("264;11;kt-3")
    >>> sku.quality == Quality.STRANGE, sku.killstreak_tier == KillstreakTier.PROFESSIONAL
    (True, True)
    >>> str(sku)
    '264;11;kt-3'
"""

from tf2_sku.encoders.sku_formatter import SkuFormatter, format_sku
from tf2_sku.errors import (
    DeserializationError,
    DuplicateError,
    InsertError,
    InvalidFormatError,
    InvalidValueError,
    ParseError,
    ParseIntError,
    SetFullError,
    SkuError,
)
from tf2_sku.models.bounded_set import BoundedMultiset, SpellSet, StrangePartSet
from tf2_sku.models.sku import Sku
from tf2_sku.types.enums import (
    FootprintsSpell,
    IntErrorKind,
    KillstreakTier,
    Killstreaker,
    Paint,
    PaintSpell,
    Quality,
    Sheen,
    Spell,
    StrangePart,
    Wear,
)
from tf2_sku.utils.handlers import decode_lenient, decode_skus, decode_strict, parse_attribute

__all__ = [
    "BoundedMultiset",
    "DeserializationError",
    "DuplicateError",
    "FootprintsSpell",
    "InsertError",
    "IntErrorKind",
    "InvalidFormatError",
    "InvalidValueError",
    "KillstreakTier",
    "Killstreaker",
    "Paint",
    "PaintSpell",
    "ParseError",
    "ParseIntError",
    "Quality",
    "SetFullError",
    "Sheen",
    "Sku",
    "SkuError",
    "SkuFormatter",
    "Spell",
    "SpellSet",
    "StrangePart",
    "StrangePartSet",
    "Wear",
    "decode_lenient",
    "decode_skus",
    "decode_strict",
    "format_sku",
    "parse_attribute",
]
