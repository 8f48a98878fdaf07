from typing import TYPE_CHECKING, List

from tf2_sku.types.enums import (
    SPELL_DEFINDEX_EXORCISM,
    SPELL_DEFINDEX_FOOTPRINTS,
    SPELL_DEFINDEX_HALLOWEEN_FIRE,
    SPELL_DEFINDEX_PAINT,
    SPELL_DEFINDEX_PUMPKIN_BOMBS,
    SPELL_DEFINDEX_VOICES_FROM_BELOW,
    Spell,
)

if TYPE_CHECKING:
    from tf2_sku.models.sku import Sku

# Spells with a value are written as "<label>-<value>"
SPELL_LABELS = {
    SPELL_DEFINDEX_PAINT: "paintspell",
    SPELL_DEFINDEX_FOOTPRINTS: "footprints",
    SPELL_DEFINDEX_VOICES_FROM_BELOW: "voices",
    SPELL_DEFINDEX_PUMPKIN_BOMBS: "pumpkinbombs",
    SPELL_DEFINDEX_HALLOWEEN_FIRE: "halloweenfire",
    SPELL_DEFINDEX_EXORCISM: "exorcism",
}


def spell_segment(spell: Spell) -> str:
    label = SPELL_LABELS[spell.attribute_defindex]
    attribute_id = spell.attribute_id
    if attribute_id is None:
        return label
    return f"{label}-{attribute_id}"


class SkuFormatter:
    """Writes SKUs back to their canonical string form"""

    @staticmethod
    def format(sku: "Sku") -> str:
        """
        Format a SKU as "defindex;quality" followed by its attributes.

        Attributes are always written in the same order regardless of how the
        SKU was built, so decoding and re-formatting is stable.
        """
        parts: List[str] = [str(sku.defindex), str(int(sku.quality))]

        if sku.particle is not None:
            parts.append(f"u{sku.particle}")
        if not sku.craftable:
            parts.append("uncraftable")
        if sku.australium:
            parts.append("australium")
        if sku.strange:
            parts.append("strange")
        if sku.wear is not None:
            parts.append(f"w{int(sku.wear)}")
        if sku.skin is not None:
            parts.append(f"pk{sku.skin}")
        if sku.killstreak_tier is not None:
            parts.append(f"kt-{int(sku.killstreak_tier)}")
        if sku.festivized:
            parts.append("festive")
        if sku.crate_number is not None:
            parts.append(f"c{sku.crate_number}")
        if sku.craft_number is not None:
            parts.append(f"n{sku.craft_number}")
        if sku.target_defindex is not None:
            parts.append(f"td-{sku.target_defindex}")
        if sku.output_defindex is not None:
            parts.append(f"od-{sku.output_defindex}")
        if sku.output_quality is not None:
            parts.append(f"oq-{int(sku.output_quality)}")
        if sku.paint is not None:
            parts.append(f"p{int(sku.paint)}")
        if sku.sheen is not None:
            parts.append(f"ks-{int(sku.sheen)}")
        if sku.killstreaker is not None:
            parts.append(f"ke-{int(sku.killstreaker)}")

        for strange_part in sku.strange_parts:
            parts.append(f"sp-{int(strange_part)}")
        for spell in sku.spells:
            parts.append(spell_segment(spell))

        return ";".join(parts)


def format_sku(sku: "Sku") -> str:
    return SkuFormatter.format(sku)
