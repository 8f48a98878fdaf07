import logging

import pytest
from tf2_sku import Sku, decode_skus
from tf2_sku.errors import InvalidValueError, ParseError
from tf2_sku.types.enums import KillstreakTier, Quality, Spell
from tf2_sku.utils.handlers import decode_lenient, decode_skus_iter, decode_strict, parse_attribute


class TestHandlers:
    def test_decode_strict(self):
        assert decode_strict("264;11;kt-3") == Sku(264, Quality.STRANGE, killstreak_tier=KillstreakTier.PROFESSIONAL)

    def test_decode_lenient(self):
        assert decode_lenient("264;bad;kt-3") == Sku(264, Quality.NORMAL, killstreak_tier=KillstreakTier.PROFESSIONAL)

    def test_parse_attribute(self):
        sku = Sku(627, Quality.UNIQUE)
        parse_attribute(sku, "exorcism")

        assert Spell.EXORCISM in sku.spells

    def test_decode_skus_lenient_keeps_everything(self):
        skus = decode_skus(["264;11", "1071;122"])

        assert [sku.quality for sku in skus] == [Quality.STRANGE, Quality.NORMAL]

    def test_decode_skus_strict_skips_invalid(self, caplog):
        with caplog.at_level(logging.WARNING):
            skus = decode_skus(["264;11", "1071;122", "5021;6"], strict=True)

        assert [sku.defindex for sku in skus] == [264, 5021]
        assert "1071;122" in caplog.text

    def test_decode_skus_strict_raises(self):
        with pytest.raises(InvalidValueError):
            decode_skus(["264;11", "1071;122"], strict=True, skip_invalid=False)

    def test_decode_skus_iter_is_lazy(self):
        iterator = decode_skus_iter(["264;11", "1071;122"], strict=True, skip_invalid=False)

        assert next(iterator).defindex == 264
        with pytest.raises(ParseError):
            next(iterator)


class TestSku:
    def test_from_string(self):
        assert Sku.from_string("5021;6") == Sku(5021, Quality.UNIQUE)

    def test_from_string_raises(self):
        with pytest.raises(ParseError):
            Sku.from_string("5021")

    def test_parse_attributes_never_raises(self):
        sku = Sku.parse_attributes("u43;;;pk1;kt-0;garbage")

        assert (sku.defindex, sku.quality, sku.particle, sku.skin) == (-1, Quality.NORMAL, 43, 1)

    def test_hash_ignores_spell_order(self):
        first = Sku.from_string("627;6;voices;exorcism")
        second = Sku.from_string("627;6;exorcism;voices")

        assert first == second
        assert len({first, second}) == 1

    def test_copy_is_independent(self):
        sku = Sku.from_string("627;6;voices")
        copied = sku.copy()
        copied.spells.insert(Spell.EXORCISM)
        copied.defindex = 628

        assert sku == Sku.from_string("627;6;voices")
        assert str(copied) == "628;6;voices;exorcism"

    def test_str(self):
        sku = Sku(defindex=5021, quality=Quality.UNIQUE, craftable=False)

        assert str(sku) == sku.to_sku_string() == "5021;6;uncraftable"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
