import pytest
from tf2_sku.encoders.sku_formatter import SkuFormatter, format_sku, spell_segment
from tf2_sku.models.bounded_set import SpellSet, StrangePartSet
from tf2_sku.models.sku import Sku
from tf2_sku.types.enums import (
    KillstreakTier,
    Killstreaker,
    Paint,
    Quality,
    Sheen,
    Spell,
    StrangePart,
    Wear,
)
from tf2_sku.utils.handlers import decode_strict


def _biggest_sku() -> Sku:
    return Sku(
        defindex=2 ** 31 - 1,
        quality=Quality.STRANGE,
        particle=2 ** 32 - 1,
        skin=2 ** 32 - 1,
        killstreak_tier=KillstreakTier.PROFESSIONAL,
        wear=Wear.FIELD_TESTED,
        sheen=Sheen.TEAM_SHINE,
        killstreaker=Killstreaker.HYPNO_BEAM,
        craft_number=2 ** 32 - 1,
        crate_number=2 ** 32 - 1,
        paint=Paint.DRABLY_OLIVE,
        spells=SpellSet.double(Spell.TEAM_SPIRIT_FOOTPRINTS, Spell.CHROMATIC_CORRUPTION),
        strange_parts=StrangePartSet.triple(
            StrangePart.SAPPERS_REMOVED,
            StrangePart.CLOAKED_SPIES_KILLED,
            StrangePart.BUILDINGS_DESTROYED,
        ),
        craftable=False,
        australium=True,
        strange=True,
        festivized=True,
        target_defindex=2 ** 32 - 1,
        output_defindex=2 ** 32 - 1,
        output_quality=Quality.COLLECTORS,
    )


class TestSkuFormatter:
    def test_defindex_and_quality_only(self):
        assert format_sku(Sku(264, Quality.STRANGE)) == "264;11"

    def test_default_sku(self):
        assert str(Sku()) == "0;0"

    def test_killstreak_tier(self):
        sku = Sku(264, Quality.STRANGE)
        sku.killstreak_tier = KillstreakTier.PROFESSIONAL

        assert sku.to_sku_string() == "264;11;kt-3"

    def test_professional_killstreak(self):
        sku = Sku(
            defindex=264,
            quality=Quality.STRANGE,
            killstreak_tier=KillstreakTier.PROFESSIONAL,
            sheen=Sheen.TEAM_SHINE,
            killstreaker=Killstreaker.FIRE_HORNS,
        )

        assert str(sku) == "264;11;kt-3;ks-1;ke-2002"

    def test_fixed_field_order(self):
        text = SkuFormatter.format(_biggest_sku())

        assert text == (
            "2147483647;11;u4294967295;uncraftable;australium;strange;w3;pk4294967295;kt-3;"
            "festive;c4294967295;n4294967295;td-4294967295;od-4294967295;oq-14;p8421376;"
            "ks-1;ke-2008;sp-36;sp-37;sp-19;footprints-1;paintspell-1"
        )

    def test_biggest_sku_length(self):
        length = len(str(_biggest_sku()))

        assert 200 < length < 250

    def test_input_order_is_normalized(self):
        sku = decode_strict("5021;6;kt-1;u13;festive;uncraftable")

        assert str(sku) == "5021;6;u13;uncraftable;kt-1;festive"

    def test_negative_defindex(self):
        assert str(Sku(-100, Quality.UNIQUE)) == "-100;6"

    @pytest.mark.parametrize(
        "spell,segment",
        [
            (Spell.HEADLESS_HORSESHOES, "footprints-2"),
            (Spell.ROTTEN_ORANGE_FOOTPRINTS, "footprints-13595446"),
            (Spell.DIE_JOB, "paintspell-0"),
            (Spell.SPECTRAL_SPECTRUM, "paintspell-3"),
            (Spell.VOICES_FROM_BELOW, "voices"),
            (Spell.EXORCISM, "exorcism"),
            (Spell.HALLOWEEN_FIRE, "halloweenfire"),
            (Spell.PUMPKIN_BOMBS, "pumpkinbombs"),
        ]
    )
    def test_spell_segments(self, spell, segment):
        assert spell_segment(spell) == segment


class TestRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            "264;11;kt-3",
            "424;15;u703;w3;pk307;kt-3;ks-1;ke-2008",
            "16310;15;u703;w2;pk310",
            "627;6;footprints-2;voices",
            "627;6;sp-36;sp-37",
            "-100;6",
            "200;11;australium;kt-3",
            "5021;6;uncraftable;c82;n14",
            "20000;6;td-1071;od-6522;oq-14",
            "378;6;p15185211",
        ]
    )
    def test_canonical_strings_round_trip(self, text):
        sku = decode_strict(text)

        assert str(sku) == text
        assert decode_strict(str(sku)) == sku

    def test_biggest_sku_round_trips(self):
        sku = _biggest_sku()

        assert decode_strict(str(sku)) == sku

    def test_formatting_is_idempotent(self):
        first = str(decode_strict("5021;6;voices;sp-37;kt-1;sp-36;exorcism;u13;junk"))
        second = str(decode_strict(first))

        assert first == second
        assert first == "5021;6;u13;kt-1;sp-37;sp-36;voices;exorcism"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
