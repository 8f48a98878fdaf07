from enum import Enum, IntEnum
from typing import Optional


class Quality(IntEnum):
    """Item quality tiers"""

    NORMAL = 0
    GENUINE = 1
    RARITY2 = 2
    VINTAGE = 3
    RARITY3 = 4
    UNUSUAL = 5
    UNIQUE = 6
    COMMUNITY = 7
    VALVE = 8
    SELF_MADE = 9
    CUSTOMIZED = 10
    STRANGE = 11
    COMPLETED = 12
    HAUNTED = 13
    COLLECTORS = 14
    DECORATED_WEAPON = 15


class KillstreakTier(IntEnum):
    """Killstreak kit tiers"""

    KILLSTREAK = 1
    SPECIALIZED = 2
    PROFESSIONAL = 3


class Wear(IntEnum):
    """Wear of decorated weapons and war paints"""

    FACTORY_NEW = 1
    MINIMAL_WEAR = 2
    FIELD_TESTED = 3
    WELL_WORN = 4
    BATTLE_SCARRED = 5


class Sheen(IntEnum):
    """Specialized killstreak sheens"""

    TEAM_SHINE = 1
    DEADLY_DAFFODIL = 2
    MANNDARIN = 3
    MEAN_GREEN = 4
    AGONIZING_EMERALD = 5
    VILLAINOUS_VIOLET = 6
    HOT_ROD = 7


class Killstreaker(IntEnum):
    """Professional killstreak effects"""

    FIRE_HORNS = 2002
    CEREBRAL_DISCHARGE = 2003
    TORNADO = 2004
    FLAMES = 2005
    SINGULARITY = 2006
    INCINERATOR = 2007
    HYPNO_BEAM = 2008


class Paint(IntEnum):
    """Paint cans, keyed by their decimal RGB value"""

    # Single color
    A_COLOR_SIMILAR_TO_SLATE = 3100495  # 2F4F4F
    A_DEEP_COMMITMENT_TO_PURPLE = 8208497  # 7D4071
    A_DISTINCTIVE_LACK_OF_HUE = 1315860  # 141414
    AGED_MOUSTACHE_GREY = 8289918  # 7E7E7E
    AN_EXTRAORDINARY_ABUNDANCE_OF_TINGE = 15132390  # E6E6E6
    AUSTRALIUM_GOLD = 15185211  # E7B53B
    COLOR_NO_216_190_216 = 14204632  # D8BED8
    DARK_SALMON_INJUSTICE = 15308410  # E9967A
    DRABLY_OLIVE = 8421376  # 808000
    INDUBITABLY_GREEN = 7511618  # 729E42
    MANN_CO_ORANGE = 13595446  # CF7336
    MUSKELMANNBRAUN = 10843461  # A57545
    NOBLE_HATTERS_VIOLET = 5322826  # 51384A
    PECULIARLY_DRAB_TINCTURE = 12955537  # C5AF91
    PINK_AS_HELL = 16738740  # FF69B4
    RADIGAN_CONAGHER_BROWN = 6901050  # 694D3A
    THE_BITTER_TASTE_OF_DEFEAT_AND_LIME = 3329330  # 32CD32
    THE_COLOR_OF_A_GENTLEMANNS_BUSINESS_PANTS = 15787660  # F0E68C
    YE_OLDE_RUSTIC_COLOUR = 8154199  # 7C6C57
    ZEPHENIAHS_GREED = 4345659  # 424F3B

    # Team colors (RED value)
    AN_AIR_OF_DEBONAIR = 6637376  # 654740
    BALACLAVAS_ARE_FOREVER = 3874595  # 3B1F23
    CREAM_SPIRIT = 12807213  # C36C2D
    OPERATORS_OVERALLS = 4732984  # 483838
    TEAM_SPIRIT = 12073019  # B8383B
    THE_VALUE_OF_TEAMWORK = 8400928  # 803020
    WATERLOGGED_LAB_COAT = 11049612  # A89A8C
    A_MANNS_MINT = 12377523  # BCDDB3
    AFTER_EIGHT = 2960676  # 2D2D24


class StrangePart(IntEnum):
    """Strange parts, keyed by their kill eater score type"""

    SCOUTS_KILLED = 10
    SNIPERS_KILLED = 11
    SOLDIERS_KILLED = 12
    DEMOMEN_KILLED = 13
    HEAVIES_KILLED = 14
    PYROS_KILLED = 15
    SPIES_KILLED = 16
    ENGINEERS_KILLED = 17
    MEDICS_KILLED = 18
    BUILDINGS_DESTROYED = 19
    PROJECTILES_REFLECTED = 20
    HEADSHOT_KILLS = 21
    AIRBORNE_ENEMY_KILLS = 22
    GIB_KILLS = 23
    KILLS_UNDER_A_FULL_MOON = 27
    DOMINATIONS = 28
    REVENGES = 30
    POSTHUMOUS_KILLS = 31
    TEAMMATES_EXTINGUISHED = 32
    CRITICAL_KILLS = 33
    KILLS_WHILE_EXPLOSIVE_JUMPING = 34
    SAPPERS_REMOVED = 36
    CLOAKED_SPIES_KILLED = 37
    MEDICS_KILLED_THAT_HAVE_FULL_UBERCHARGE = 38
    ROBOTS_DESTROYED = 39
    GIANT_ROBOTS_DESTROYED = 40
    KILLS_WHILE_LOW_HEALTH = 44
    KILLS_DURING_HALLOWEEN = 45
    ROBOTS_DESTROYED_DURING_HALLOWEEN = 46
    DEFENDERS_KILLED = 47
    SUBMERGED_ENEMY_KILLS = 48
    KILLS_WHILE_INVULN_UBERCHARGED = 49
    TANKS_DESTROYED = 61
    LONG_DISTANCE_KILLS = 62
    KILLS_DURING_VICTORY_TIME = 64
    ROBOT_SCOUTS_DESTROYED = 65
    ROBOT_SPIES_DESTROYED = 74
    TAUNT_KILLS = 77
    UNUSUAL_WEARING_PLAYER_KILLS = 78
    BURNING_PLAYER_KILLS = 79
    KILLSTREAKS_ENDED = 80
    FREEZECAM_TAUNT_APPEARANCES = 81
    DAMAGE_DEALT = 82
    FIRES_SURVIVED = 83
    ALLIED_HEALING_DONE = 84
    POINT_BLANK_KILLS = 85
    FULL_HEALTH_KILLS = 88
    TAUNTING_PLAYER_KILLS = 89
    NOT_CRIT_NOR_MINICRIT_KILLS = 93
    PLAYER_HITS = 94
    ASSISTS = 95


class FootprintsSpell(IntEnum):
    """Footprints spells, keyed by their attribute value"""

    TEAM_SPIRIT_FOOTPRINTS = 1
    HEADLESS_HORSESHOES = 2
    CORPSE_GRAY_FOOTPRINTS = 3100495
    VIOLENT_VIOLET_FOOTPRINTS = 5322826
    BRUISED_PURPLE_FOOTPRINTS = 8208497
    GANGREEN_FOOTPRINTS = 8421376
    ROTTEN_ORANGE_FOOTPRINTS = 13595446


class PaintSpell(IntEnum):
    """Paint spells, keyed by their attribute value"""

    DIE_JOB = 0
    CHROMATIC_CORRUPTION = 1
    PUTRESCENT_PIGMENTATION = 2
    SPECTRAL_SPECTRUM = 3
    SINISTER_STAINING = 4


class Spell(IntEnum):
    """Halloween spells.

    Values are ordinals only. A spell belongs to a family identified by the
    attribute defindex it is stored under; two spells of the same family can
    not be applied to one item.
    """

    # Paint spells (attribute 1004)
    DIE_JOB = 1
    CHROMATIC_CORRUPTION = 2
    PUTRESCENT_PIGMENTATION = 3
    SPECTRAL_SPECTRUM = 4
    SINISTER_STAINING = 5

    # Footprints spells (attribute 1005)
    TEAM_SPIRIT_FOOTPRINTS = 6
    HEADLESS_HORSESHOES = 7
    CORPSE_GRAY_FOOTPRINTS = 8
    VIOLENT_VIOLET_FOOTPRINTS = 9
    BRUISED_PURPLE_FOOTPRINTS = 10
    GANGREEN_FOOTPRINTS = 11
    ROTTEN_ORANGE_FOOTPRINTS = 12

    VOICES_FROM_BELOW = 13  # attribute 1006
    PUMPKIN_BOMBS = 14  # attribute 1007
    HALLOWEEN_FIRE = 15  # attribute 1008
    EXORCISM = 16  # attribute 1009

    @property
    def attribute_defindex(self) -> int:
        """Attribute defindex of the spell's family."""
        if self in _PAINT_SPELLS:
            return SPELL_DEFINDEX_PAINT
        if self in _FOOTPRINTS_SPELLS:
            return SPELL_DEFINDEX_FOOTPRINTS
        return _FIXED_SPELL_DEFINDEXES[self]

    @property
    def attribute_id(self) -> Optional[int]:
        """Attribute value for spells that carry one, None for the fixed spells."""
        if self in _PAINT_SPELLS:
            return int(_PAINT_SPELLS[self])
        if self in _FOOTPRINTS_SPELLS:
            return int(_FOOTPRINTS_SPELLS[self])
        return None

    @classmethod
    def from_paint_spell(cls, paint_spell: PaintSpell) -> "Spell":
        return cls[paint_spell.name]

    @classmethod
    def from_footprints_spell(cls, footprints_spell: FootprintsSpell) -> "Spell":
        return cls[footprints_spell.name]


SPELL_DEFINDEX_PAINT = 1004
SPELL_DEFINDEX_FOOTPRINTS = 1005
SPELL_DEFINDEX_VOICES_FROM_BELOW = 1006
SPELL_DEFINDEX_PUMPKIN_BOMBS = 1007
SPELL_DEFINDEX_HALLOWEEN_FIRE = 1008
SPELL_DEFINDEX_EXORCISM = 1009

_PAINT_SPELLS = {Spell[member.name]: member for member in PaintSpell}
_FOOTPRINTS_SPELLS = {Spell[member.name]: member for member in FootprintsSpell}
_FIXED_SPELL_DEFINDEXES = {
    Spell.VOICES_FROM_BELOW: SPELL_DEFINDEX_VOICES_FROM_BELOW,
    Spell.PUMPKIN_BOMBS: SPELL_DEFINDEX_PUMPKIN_BOMBS,
    Spell.HALLOWEEN_FIRE: SPELL_DEFINDEX_HALLOWEEN_FIRE,
    Spell.EXORCISM: SPELL_DEFINDEX_EXORCISM,
}


class IntErrorKind(Enum):
    """Reasons an integer value failed to parse"""

    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    POS_OVERFLOW = "pos_overflow"
    NEG_OVERFLOW = "neg_overflow"


def display_name(member: Enum) -> str:
    """Human readable name of an enum member, e.g. 'Headless Horseshoes'."""
    return member.name.replace("_", " ").title()
