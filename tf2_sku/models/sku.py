from dataclasses import dataclass, field, replace
from typing import Optional

from tf2_sku.models.bounded_set import SpellSet, StrangePartSet
from tf2_sku.types.enums import KillstreakTier, Killstreaker, Paint, Quality, Sheen, Wear


@dataclass(unsafe_hash=True)
class Sku:
    """
    Attributes identifying one item.

    Built either by assigning fields directly or by decoding a SKU string such
    as "264;11;kt-3". Equality and hashing cover every field, and the spell and
    strange part sets compare regardless of slot order.
    """
    # Can be negative for items not defined in the schema, e.g. "-100;6" (Random Craft Hat)
    defindex: int = 0
    quality: Quality = Quality.NORMAL
    craftable: bool = True
    australium: bool = False
    # Strange flag for non-strange quality items, not the Strange quality itself
    strange: bool = False
    festivized: bool = False
    particle: Optional[int] = None
    skin: Optional[int] = None
    killstreak_tier: Optional[KillstreakTier] = None
    wear: Optional[Wear] = None
    target_defindex: Optional[int] = None
    output_defindex: Optional[int] = None
    output_quality: Optional[Quality] = None
    craft_number: Optional[int] = None
    crate_number: Optional[int] = None
    paint: Optional[Paint] = None
    sheen: Optional[Sheen] = None
    killstreaker: Optional[Killstreaker] = None
    spells: SpellSet = field(default_factory=SpellSet)
    strange_parts: StrangePartSet = field(default_factory=StrangePartSet)

    @classmethod
    def from_string(cls, text: str) -> "Sku":
        """Strictly parse a SKU string, raising ParseError on bad input."""
        from tf2_sku.utils.handlers import decode_strict
        return decode_strict(text)

    @classmethod
    def parse_attributes(cls, text: str) -> "Sku":
        """
        Parse whatever can be parsed, never failing.

        Unparseable defindex falls back to -1 and quality to Normal. For a
        well-formed SKU this gives the same result as from_string.
        """
        from tf2_sku.utils.handlers import decode_lenient
        return decode_lenient(text)

    def to_sku_string(self) -> str:
        from tf2_sku.encoders.sku_formatter import format_sku
        return format_sku(self)

    def copy(self) -> "Sku":
        return replace(self, spells=self.spells.copy(), strange_parts=self.strange_parts.copy())

    def __str__(self) -> str:
        return self.to_sku_string()
