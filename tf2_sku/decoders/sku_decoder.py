from tf2_sku.decoders.sku_decoder_base import SkuDecoderBase
from tf2_sku.decoders.numbers import parse_enum_u32, parse_i32, parse_u32, split_token
from tf2_sku.errors import InsertError, InvalidFormatError, ParseError
from tf2_sku.models.sku import Sku
from tf2_sku.types.enums import (
    FootprintsSpell,
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
from typing import Callable, Dict

KEY_DEFINDEX = "defindex"
KEY_QUALITY = "quality"
KEY_PARTICLE = "particle"
KEY_WEAR = "wear"
KEY_CRAFT_NUMBER = "craft number"
KEY_CRATE_NUMBER = "crate number"
KEY_PAINT = "paint"
KEY_SKIN = "skin"
KEY_KILLSTREAK_TIER = "killstreak tier"
KEY_TARGET_DEFINDEX = "target defindex"
KEY_OUTPUT_DEFINDEX = "output defindex"
KEY_OUTPUT_QUALITY = "output quality"
KEY_SHEEN = "sheen"
KEY_KILLSTREAKER = "killstreaker"
KEY_STRANGE_PART = "strange part"
KEY_FOOTPRINTS_SPELL = "footprints spell"
KEY_PAINT_SPELL = "paint spell"

# Used by lenient decoding when the leading fields can't be parsed
FALLBACK_DEFINDEX = -1
FALLBACK_QUALITY = Quality.NORMAL


class SkuDecoder(SkuDecoderBase):
    def __init__(self):
        super().__init__()
        self.decoder_map: Dict[str, Callable[[str, Sku], None]] = {
            # Numeric and enum attributes
            "u": self._decode_particle,
            "w": self._decode_wear,
            "n": self._decode_craft_number,
            "c": self._decode_crate_number,
            "p": self._decode_paint,
            "pk": self._decode_skin,
            "kt-": self._decode_killstreak_tier,
            "td-": self._decode_target_defindex,
            "od-": self._decode_output_defindex,
            "oq-": self._decode_output_quality,
            "ks-": self._decode_sheen,
            "ke-": self._decode_killstreaker,

            # Set attributes
            "sp-": self._decode_strange_part,
            "footprints-": self._decode_footprints_spell,
            "paintspell-": self._decode_paint_spell,
            "voices": self._decode_voices_from_below,
            "exorcism": self._decode_exorcism,
            "halloweenfire": self._decode_halloween_fire,
            "pumpkinbombs": self._decode_pumpkin_bombs,

            # Flags
            "uncraftable": self._decode_uncraftable,
            "australium": self._decode_australium,
            "strange": self._decode_strange,
            "festive": self._decode_festive,
        }

    def decode_record(self, text: str) -> Sku:
        """
        Parse a SKU string, raising ParseError on the first bad value.

        The string must begin with a defindex and a quality. Unknown
        attributes are ignored.
        """
        tokens = text.split(";")
        if len(tokens) < 2:
            raise InvalidFormatError()

        defindex = parse_i32(KEY_DEFINDEX, tokens[0])
        quality = parse_enum_u32(Quality, KEY_QUALITY, tokens[1])
        sku = Sku(defindex, quality)

        for token in tokens[2:]:
            self.parse_attribute(sku, token)

        self.logger.debug("Decoded %r: %d attribute tokens", text, len(tokens) - 2)
        return sku

    def decode_lenient(self, text: str) -> Sku:
        """
        Parse a SKU string, skipping anything that fails to parse.

        A defindex that fails to parse becomes -1 and both leading tokens are
        parsed as attributes instead. A quality that fails becomes Normal and
        its token is parsed as an attribute, so "u43;..." still sets the
        particle.
        """
        tokens = text.split(";")
        defindex_str = tokens[0]
        quality_str = tokens[1] if len(tokens) > 1 else ""
        sku = Sku()

        try:
            sku.defindex = parse_i32(KEY_DEFINDEX, defindex_str)
        except ParseError as error:
            self.logger.debug("Falling back to defindex %d: %s", FALLBACK_DEFINDEX, error)
            sku.defindex = FALLBACK_DEFINDEX
            sku.quality = FALLBACK_QUALITY
            self._parse_attribute_lenient(sku, defindex_str)
            self._parse_attribute_lenient(sku, quality_str)
        else:
            try:
                sku.quality = parse_enum_u32(Quality, KEY_QUALITY, quality_str)
            except ParseError as error:
                self.logger.debug("Falling back to quality %s: %s", FALLBACK_QUALITY.name, error)
                sku.quality = FALLBACK_QUALITY
                self._parse_attribute_lenient(sku, quality_str)

        for token in tokens[2:]:
            self._parse_attribute_lenient(sku, token)

        return sku

    def parse_attribute(self, sku: Sku, token: str) -> None:
        """Apply one attribute token to sku, raising ParseError on a bad value."""
        if not token:
            return

        name, value = split_token(token)
        decoder_func = self.decoder_map.get(name)
        if decoder_func:
            decoder_func(value, sku)
        else:
            self.logger.debug("Ignoring unknown SKU attribute %r", token)

    def _parse_attribute_lenient(self, sku: Sku, token: str) -> None:
        try:
            self.parse_attribute(sku, token)
        except ParseError as error:
            self.logger.debug("Skipping SKU attribute %r: %s", token, error)

    def _insert(self, container, value) -> None:
        # Extra or repeated spells and parts are dropped
        try:
            container.insert(value)
        except InsertError as error:
            self.logger.debug("Dropped %r: %s", value, error)

    # ========== DECODERS ==========

    def _decode_particle(self, value: str, sku: Sku) -> None:
        sku.particle = parse_u32(KEY_PARTICLE, value)

    def _decode_wear(self, value: str, sku: Sku) -> None:
        sku.wear = parse_enum_u32(Wear, KEY_WEAR, value)

    def _decode_craft_number(self, value: str, sku: Sku) -> None:
        sku.craft_number = parse_u32(KEY_CRAFT_NUMBER, value)

    def _decode_crate_number(self, value: str, sku: Sku) -> None:
        sku.crate_number = parse_u32(KEY_CRATE_NUMBER, value)

    def _decode_paint(self, value: str, sku: Sku) -> None:
        sku.paint = parse_enum_u32(Paint, KEY_PAINT, value)

    def _decode_skin(self, value: str, sku: Sku) -> None:
        sku.skin = parse_u32(KEY_SKIN, value)

    def _decode_killstreak_tier(self, value: str, sku: Sku) -> None:
        sku.killstreak_tier = parse_enum_u32(KillstreakTier, KEY_KILLSTREAK_TIER, value)

    def _decode_target_defindex(self, value: str, sku: Sku) -> None:
        sku.target_defindex = parse_u32(KEY_TARGET_DEFINDEX, value)

    def _decode_output_defindex(self, value: str, sku: Sku) -> None:
        sku.output_defindex = parse_u32(KEY_OUTPUT_DEFINDEX, value)

    def _decode_output_quality(self, value: str, sku: Sku) -> None:
        sku.output_quality = parse_enum_u32(Quality, KEY_OUTPUT_QUALITY, value)

    def _decode_sheen(self, value: str, sku: Sku) -> None:
        sku.sheen = parse_enum_u32(Sheen, KEY_SHEEN, value)

    def _decode_killstreaker(self, value: str, sku: Sku) -> None:
        sku.killstreaker = parse_enum_u32(Killstreaker, KEY_KILLSTREAKER, value)

    def _decode_strange_part(self, value: str, sku: Sku) -> None:
        self._insert(sku.strange_parts, parse_enum_u32(StrangePart, KEY_STRANGE_PART, value))

    def _decode_footprints_spell(self, value: str, sku: Sku) -> None:
        footprints = parse_enum_u32(FootprintsSpell, KEY_FOOTPRINTS_SPELL, value)
        self._insert(sku.spells, Spell.from_footprints_spell(footprints))

    def _decode_paint_spell(self, value: str, sku: Sku) -> None:
        paint_spell = parse_enum_u32(PaintSpell, KEY_PAINT_SPELL, value)
        self._insert(sku.spells, Spell.from_paint_spell(paint_spell))

    def _decode_voices_from_below(self, value: str, sku: Sku) -> None:
        self._insert(sku.spells, Spell.VOICES_FROM_BELOW)

    def _decode_exorcism(self, value: str, sku: Sku) -> None:
        self._insert(sku.spells, Spell.EXORCISM)

    def _decode_halloween_fire(self, value: str, sku: Sku) -> None:
        self._insert(sku.spells, Spell.HALLOWEEN_FIRE)

    def _decode_pumpkin_bombs(self, value: str, sku: Sku) -> None:
        self._insert(sku.spells, Spell.PUMPKIN_BOMBS)

    # ========== FLAGS ==========

    def _decode_uncraftable(self, value: str, sku: Sku) -> None:
        sku.craftable = False

    def _decode_australium(self, value: str, sku: Sku) -> None:
        sku.australium = True

    def _decode_strange(self, value: str, sku: Sku) -> None:
        sku.strange = True

    def _decode_festive(self, value: str, sku: Sku) -> None:
        sku.festivized = True
