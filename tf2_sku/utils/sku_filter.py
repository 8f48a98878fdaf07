import pandas as pd
from typing import Iterable, Optional
from tf2_sku.types.enums import KillstreakTier, Quality


class SkuFilter:
    """
    Filters over DataFrames produced by SkuExporter.
    Filters gracefully handle missing columns by returning the input unchanged.
    """

    @staticmethod
    def filter_by_quality(df: pd.DataFrame, qualities: Iterable[Quality]) -> pd.DataFrame:
        """Keep rows whose quality is one of the given qualities"""
        if 'QUALITY' not in df.columns:
            return df
        values = [int(quality) for quality in qualities]
        return df[df['QUALITY'].isin(values)].reset_index(drop=True)

    @staticmethod
    def filter_by_defindex(df: pd.DataFrame, defindex: int) -> pd.DataFrame:
        if 'DEFINDEX' not in df.columns:
            return df
        return df[df['DEFINDEX'] == defindex].reset_index(drop=True)

    @staticmethod
    def filter_craftable(df: pd.DataFrame, craftable: bool = True) -> pd.DataFrame:
        """Keep craftable rows, or uncraftable ones with craftable=False"""
        if 'CRAFTABLE' not in df.columns:
            return df
        return df[df['CRAFTABLE'] == craftable].reset_index(drop=True)

    @staticmethod
    def filter_unusual(df: pd.DataFrame, particle: Optional[int] = None) -> pd.DataFrame:
        """Keep rows with a particle effect, optionally a specific one"""
        if 'PARTICLE' not in df.columns:
            return df
        if particle is None:
            mask = df['PARTICLE'].notna()
        else:
            mask = df['PARTICLE'] == particle
        return df[mask.fillna(False)].reset_index(drop=True)

    @staticmethod
    def filter_by_killstreak_tier(df: pd.DataFrame,
                                  min_tier: KillstreakTier = KillstreakTier.KILLSTREAK) -> pd.DataFrame:
        """Keep rows with at least the given killstreak tier"""
        if 'KILLSTREAK_TIER' not in df.columns:
            return df
        mask = df['KILLSTREAK_TIER'].fillna(0) >= int(min_tier)
        return df[mask].reset_index(drop=True)

    @staticmethod
    def filter_with_spells(df: pd.DataFrame) -> pd.DataFrame:
        if 'SPELLS' not in df.columns:
            return df
        return df[df['SPELLS'].notna()].reset_index(drop=True)

    @staticmethod
    def filter_with_strange_parts(df: pd.DataFrame) -> pd.DataFrame:
        if 'STRANGE_PARTS' not in df.columns:
            return df
        return df[df['STRANGE_PARTS'].notna()].reset_index(drop=True)

    @staticmethod
    def get_statistics(df: pd.DataFrame) -> dict:
        """Summary counts for an exported DataFrame"""
        stats = {
            'total_skus': len(df),
            'unique_skus': df['SKU'].nunique() if 'SKU' in df.columns else None,
            'unique_defindexes': df['DEFINDEX'].nunique() if 'DEFINDEX' in df.columns else None,
            'uncraftable_count': None,
            'unusual_count': None,
            'by_quality': {},
        }

        if 'CRAFTABLE' in df.columns:
            stats['uncraftable_count'] = int((df['CRAFTABLE'] == False).sum())  # noqa: E712
        if 'PARTICLE' in df.columns:
            stats['unusual_count'] = int(df['PARTICLE'].notna().sum())
        if 'QUALITY_NAME' in df.columns:
            counts = df['QUALITY_NAME'].value_counts()
            stats['by_quality'] = {str(name): int(count) for name, count in counts.items() if count > 0}

        return stats
