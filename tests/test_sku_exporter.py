import pandas as pd
import pytest
from tf2_sku.exporters.sku_exporter import SkuExporter
from tf2_sku.types.enums import KillstreakTier, Quality
from tf2_sku.utils.handlers import decode_skus
from tf2_sku.utils.sku_filter import SkuFilter

SAMPLE_SKUS = [
    "264;11;kt-3",
    "424;15;u703;w3;pk307;kt-3;ks-1;ke-2008",
    "5021;6;uncraftable;c82;n14",
    "378;5;u13;festive",
    "627;6;footprints-2;voices;sp-36",
    "264;11;kt-3",
]


@pytest.fixture
def skus():
    return decode_skus(SAMPLE_SKUS, strict=True)


@pytest.fixture
def df(skus):
    return SkuExporter.records_to_dataframe(skus)


class TestSkuExporter:
    def test_columns(self, df):
        assert list(df.columns) == SkuExporter.ALL_COLUMNS
        assert len(df) == len(SAMPLE_SKUS)

    def test_dtypes(self, df):
        assert str(df['DEFINDEX'].dtype) == 'Int64'
        assert str(df['PARTICLE'].dtype) == 'Int64'
        assert str(df['CRAFTABLE'].dtype) == 'boolean'
        assert isinstance(df['QUALITY_NAME'].dtype, pd.CategoricalDtype)

    def test_values(self, df):
        row = df.iloc[1]

        assert row['SKU'] == "424;15;u703;w3;pk307;kt-3;ks-1;ke-2008"
        assert row['DEFINDEX'] == 424
        assert row['QUALITY'] == 15
        assert row['QUALITY_NAME'] == "Decorated Weapon"
        assert row['PARTICLE'] == 703
        assert row['WEAR'] == 3
        assert row['KILLSTREAKER'] == 2008
        assert pd.isna(row['PAINT'])
        assert pd.isna(row['SPELLS'])

    def test_sets_are_joined_names(self, df):
        row = df.iloc[4]

        assert row['SPELLS'] == "HEADLESS_HORSESHOES|VOICES_FROM_BELOW"
        assert row['STRANGE_PARTS'] == "SAPPERS_REMOVED"

    def test_flags(self, df):
        assert df['CRAFTABLE'].tolist() == [True, True, False, True, True, True]
        assert df['FESTIVIZED'].tolist() == [False, False, False, True, False, False]

    def test_empty_input(self):
        df = SkuExporter.records_to_dataframe([])

        assert df.empty
        assert list(df.columns) == SkuExporter.ALL_COLUMNS

    def test_export_to_csv(self, skus, tmp_path):
        output_path = tmp_path / "skus.csv"
        df = SkuExporter.export_to_csv(skus, str(output_path))

        assert output_path.exists()
        assert len(df) == len(SAMPLE_SKUS)

        df_loaded = pd.read_csv(output_path)
        assert list(df_loaded.columns) == SkuExporter.ALL_COLUMNS
        assert df_loaded['SKU'].tolist() == SAMPLE_SKUS
        assert df_loaded['DEFINDEX'].tolist() == [264, 424, 5021, 378, 627, 264]


class TestSkuFilter:
    def test_filter_by_quality(self, df):
        result = SkuFilter.filter_by_quality(df, [Quality.STRANGE, Quality.UNUSUAL])

        assert result['SKU'].tolist() == ["264;11;kt-3", "378;5;u13;festive", "264;11;kt-3"]

    def test_filter_by_defindex(self, df):
        assert len(SkuFilter.filter_by_defindex(df, 264)) == 2

    def test_filter_craftable(self, df):
        assert len(SkuFilter.filter_craftable(df)) == 5
        assert SkuFilter.filter_craftable(df, craftable=False)['DEFINDEX'].tolist() == [5021]

    def test_filter_unusual(self, df):
        assert SkuFilter.filter_unusual(df)['PARTICLE'].tolist() == [703, 13]
        assert SkuFilter.filter_unusual(df, particle=13)['DEFINDEX'].tolist() == [378]

    def test_filter_by_killstreak_tier(self, df):
        assert len(SkuFilter.filter_by_killstreak_tier(df)) == 3
        assert len(SkuFilter.filter_by_killstreak_tier(df, KillstreakTier.PROFESSIONAL)) == 3

    def test_filter_with_sets(self, df):
        assert SkuFilter.filter_with_spells(df)['DEFINDEX'].tolist() == [627]
        assert SkuFilter.filter_with_strange_parts(df)['DEFINDEX'].tolist() == [627]

    def test_missing_column_returns_input(self, df):
        trimmed = df.drop(columns=['PARTICLE'])

        assert SkuFilter.filter_unusual(trimmed) is trimmed

    def test_statistics(self, df):
        stats = SkuFilter.get_statistics(df)

        assert stats['total_skus'] == 6
        assert stats['unique_skus'] == 5
        assert stats['unique_defindexes'] == 5
        assert stats['uncraftable_count'] == 1
        assert stats['unusual_count'] == 2
        assert stats['by_quality'] == {"Strange": 2, "Decorated Weapon": 1, "Unique": 2, "Unusual": 1}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
