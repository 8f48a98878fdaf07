from typing import Callable, Generic, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from tf2_sku.errors import DuplicateError, SetFullError
from tf2_sku.types.enums import Spell, StrangePart, display_name

T = TypeVar("T")


def _identity(value):
    return value


class BoundedMultiset(Generic[T]):
    """
    Fixed-capacity container with set semantics.

    Values live in a fixed number of slots. Two values are considered the same
    when their keys are equal, and at most one value per key is held.
    Equality and hashing ignore slot order.
    """

    CAPACITY = 0

    __slots__ = ("_capacity", "_key", "_slots")

    def __init__(self,
                 values: Iterable[Optional[T]] = (),
                 capacity: Optional[int] = None,
                 key: Optional[Callable[[T], Hashable]] = None) -> None:
        self._capacity = self.CAPACITY if capacity is None else capacity
        self._key = key or self._default_key()

        slots: List[Optional[T]] = list(values)
        if len(slots) > self._capacity:
            raise ValueError(f"{type(self).__name__} holds at most {self._capacity} values, got {len(slots)}")
        slots.extend([None] * (self._capacity - len(slots)))

        # Collapse duplicates, first occurrence wins
        for i, value in enumerate(slots):
            if value is None:
                continue
            value_key = self._key(value)
            for earlier in slots[:i]:
                if earlier is not None and self._key(earlier) == value_key:
                    slots[i] = None
                    break

        self._slots = slots

    def _default_key(self) -> Callable[[T], Hashable]:
        return _identity

    def _empty(self) -> "BoundedMultiset[T]":
        return type(self)((), capacity=self._capacity, key=self._key)

    @classmethod
    def from_iter(cls, values: Iterable[T]) -> "BoundedMultiset[T]":
        """Build a set by inserting values in order, dropping any that don't fit."""
        result = cls()
        for value in values:
            result.add(value)
        return result

    @property
    def capacity(self) -> int:
        return self._capacity

    def slots(self) -> Tuple[Optional[T], ...]:
        return tuple(self._slots)

    def insert(self, value: T) -> None:
        """
        Put a value into the first empty slot.

        Raises DuplicateError if an equivalent value is already held and
        SetFullError if every slot is taken. The set is unchanged on error.
        """
        value_key = self._key(value)
        for existing in self._slots:
            if existing is not None and self._key(existing) == value_key:
                raise DuplicateError(value)

        for index, existing in enumerate(self._slots):
            if existing is None:
                self._slots[index] = value
                return

        raise SetFullError(self._capacity)

    def add(self, value: T) -> bool:
        """Like insert, but returns whether the value was stored."""
        try:
            self.insert(value)
        except (DuplicateError, SetFullError):
            return False
        return True

    def remove(self, value: T) -> bool:
        return self.take(value) is not None

    def take(self, value: T) -> Optional[T]:
        for index, existing in enumerate(self._slots):
            if existing is not None and existing == value:
                self._slots[index] = None
                return existing
        return None

    def clear(self) -> None:
        self._slots = [None] * self._capacity

    def contains(self, value: T) -> bool:
        return any(existing is not None and existing == value for existing in self._slots)

    def is_empty(self) -> bool:
        return all(existing is None for existing in self._slots)

    def difference(self, other: "BoundedMultiset[T]") -> "BoundedMultiset[T]":
        """Values in self but not in other, keeping self's slot order."""
        result = self._empty()
        result._slots = [v if v is not None and not other.contains(v) else None for v in self._slots]
        return result

    def intersection(self, other: "BoundedMultiset[T]") -> "BoundedMultiset[T]":
        """Values in both self and other, keeping self's slot order."""
        result = self._empty()
        result._slots = [v if v is not None and other.contains(v) else None for v in self._slots]
        return result

    def is_disjoint(self, other: "BoundedMultiset[T]") -> bool:
        return self.intersection(other).is_empty()

    def copy(self) -> "BoundedMultiset[T]":
        result = self._empty()
        result._slots = list(self._slots)
        return result

    def _sorted_values(self) -> List[T]:
        return sorted(value for value in self._slots if value is not None)

    def __sub__(self, other: "BoundedMultiset[T]") -> "BoundedMultiset[T]":
        if not isinstance(other, BoundedMultiset):
            return NotImplemented
        return self.difference(other)

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return sum(1 for value in self._slots if value is not None)

    def __iter__(self) -> Iterator[T]:
        return (value for value in self._slots if value is not None)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoundedMultiset):
            return NotImplemented
        return self._capacity == other._capacity and self._sorted_values() == other._sorted_values()

    def __hash__(self) -> int:
        return hash((self._capacity, tuple(self._sorted_values())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._slots!r})"

    def __str__(self) -> str:
        return ", ".join(display_name(v) if hasattr(v, "name") else str(v) for v in self)


class SpellSet(BoundedMultiset[Spell]):
    """Holds up to 2 spells, at most one per spell family."""

    CAPACITY = 2

    __slots__ = ()

    def _default_key(self) -> Callable[[Spell], Hashable]:
        return _spell_family

    @classmethod
    def single(cls, spell: Spell) -> "SpellSet":
        return cls([spell])

    @classmethod
    def double(cls, spell1: Spell, spell2: Spell) -> "SpellSet":
        """Two spells; if both share a family only the first is kept."""
        return cls([spell1, spell2])


def _spell_family(spell: Spell) -> int:
    return spell.attribute_defindex


class StrangePartSet(BoundedMultiset[StrangePart]):
    """Holds up to 3 distinct strange parts."""

    CAPACITY = 3

    __slots__ = ()

    @classmethod
    def single(cls, strange_part: StrangePart) -> "StrangePartSet":
        return cls([strange_part])

    @classmethod
    def double(cls, strange_part1: StrangePart, strange_part2: StrangePart) -> "StrangePartSet":
        return cls([strange_part1, strange_part2])

    @classmethod
    def triple(cls,
               strange_part1: StrangePart,
               strange_part2: StrangePart,
               strange_part3: StrangePart) -> "StrangePartSet":
        return cls([strange_part1, strange_part2, strange_part3])
