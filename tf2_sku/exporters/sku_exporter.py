import pandas as pd
from typing import Iterable, Optional
from tf2_sku.models.sku import Sku
from tf2_sku.types.enums import display_name


class SkuExporter:
    """
    Flattens SKUs into a pandas DataFrame with one row per SKU.

    Enum fields are exported as their numeric values (the same numbers that
    appear in the SKU string); quality additionally gets a readable name
    column. Spells and strange parts are '|'-joined member names.
    """

    ALL_COLUMNS = [
        # Identification
        'SKU',  # Canonical SKU string
        'DEFINDEX',  # Item-type index (can be negative)
        'QUALITY',  # Quality number
        'QUALITY_NAME',  # Quality name

        # Flags
        'CRAFTABLE',
        'AUSTRALIUM',
        'STRANGE',
        'FESTIVIZED',

        # Optional values
        'PARTICLE',  # Unusual effect id
        'SKIN',  # Paint kit id
        'WEAR',
        'KILLSTREAK_TIER',
        'SHEEN',
        'KILLSTREAKER',
        'PAINT',
        'CRAFT_NUMBER',
        'CRATE_NUMBER',
        'TARGET_DEFINDEX',
        'OUTPUT_DEFINDEX',
        'OUTPUT_QUALITY',

        # Sets
        'SPELLS',
        'STRANGE_PARTS',
    ]

    INT_COLUMNS = [
        'DEFINDEX', 'QUALITY', 'PARTICLE', 'SKIN', 'WEAR', 'KILLSTREAK_TIER', 'SHEEN',
        'KILLSTREAKER', 'PAINT', 'CRAFT_NUMBER', 'CRATE_NUMBER', 'TARGET_DEFINDEX',
        'OUTPUT_DEFINDEX', 'OUTPUT_QUALITY',
    ]

    BOOL_COLUMNS = ['CRAFTABLE', 'AUSTRALIUM', 'STRANGE', 'FESTIVIZED']

    @staticmethod
    def records_to_dataframe(skus: Iterable[Sku]) -> pd.DataFrame:
        # Build by columns to avoid a list of row dicts
        columns = SkuExporter.ALL_COLUMNS
        data_cols = {col: [] for col in columns}

        for sku in skus:
            row = SkuExporter._to_row(sku)
            for col in columns:
                data_cols[col].append(row[col])

        df = pd.DataFrame(data_cols, columns=columns)
        return SkuExporter._downcast_dtypes(df)

    @staticmethod
    def export_to_csv(skus: Iterable[Sku], output_path: str, na_rep: str = '') -> pd.DataFrame:
        """Export SKUs to CSV and return the exported DataFrame"""
        df = SkuExporter.records_to_dataframe(skus)
        df.to_csv(output_path, index=False, na_rep=na_rep)
        return df

    @staticmethod
    def _to_row(sku: Sku) -> dict:
        return {
            'SKU': sku.to_sku_string(),
            'DEFINDEX': sku.defindex,
            'QUALITY': int(sku.quality),
            'QUALITY_NAME': display_name(sku.quality),
            'CRAFTABLE': sku.craftable,
            'AUSTRALIUM': sku.australium,
            'STRANGE': sku.strange,
            'FESTIVIZED': sku.festivized,
            'PARTICLE': sku.particle,
            'SKIN': sku.skin,
            'WEAR': SkuExporter._enum_value(sku.wear),
            'KILLSTREAK_TIER': SkuExporter._enum_value(sku.killstreak_tier),
            'SHEEN': SkuExporter._enum_value(sku.sheen),
            'KILLSTREAKER': SkuExporter._enum_value(sku.killstreaker),
            'PAINT': SkuExporter._enum_value(sku.paint),
            'CRAFT_NUMBER': sku.craft_number,
            'CRATE_NUMBER': sku.crate_number,
            'TARGET_DEFINDEX': sku.target_defindex,
            'OUTPUT_DEFINDEX': sku.output_defindex,
            'OUTPUT_QUALITY': SkuExporter._enum_value(sku.output_quality),
            'SPELLS': '|'.join(spell.name for spell in sku.spells) or None,
            'STRANGE_PARTS': '|'.join(part.name for part in sku.strange_parts) or None,
        }

    @staticmethod
    def _enum_value(member) -> Optional[int]:
        return None if member is None else int(member)

    @staticmethod
    def _downcast_dtypes(df: pd.DataFrame) -> pd.DataFrame:
        if df is None or df.empty:
            return df

        for col in SkuExporter.INT_COLUMNS:
            if col in df.columns:
                df[col] = pd.to_numeric(df[col], errors='coerce').astype('Int64')

        for col in SkuExporter.BOOL_COLUMNS:
            if col in df.columns:
                df[col] = df[col].astype('boolean')

        if 'QUALITY_NAME' in df.columns:
            df['QUALITY_NAME'] = df['QUALITY_NAME'].astype('category')

        return df
