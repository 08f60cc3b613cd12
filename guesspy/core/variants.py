"""Variant dictionary: curated spellings that count as the same word."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator

from loguru import logger

from guesspy.core.normalizer import normalize
from guesspy.core.types import VariantGroup


def _merge_groups(groups: Iterable[Iterable[str]]) -> list[VariantGroup]:
    """Normalize spellings and merge groups that share a spelling.

    The merged group keeps the name of the earliest group involved, so every
    spelling ends up in exactly one group.
    """
    slots: list[tuple[str, set[str]] | None] = []
    owner: dict[str, int] = {}

    for raw_group in groups:
        spellings = [s for s in (normalize(raw) for raw in raw_group) if s]
        if not spellings:
            continue

        touched = sorted({owner[s] for s in spellings if s in owner})
        if not touched:
            slots.append((spellings[0], set(spellings)))
            target = len(slots) - 1
        else:
            target = touched[0]
            name, members = slots[target]  # type: ignore[misc]
            for other in touched[1:]:
                other_name, other_members = slots[other]  # type: ignore[misc]
                logger.debug(f"Merging variant group '{other_name}' into '{name}'")
                members |= other_members
                slots[other] = None
            members.update(spellings)

        for spelling in slots[target][1]:  # type: ignore[index]
            owner[spelling] = target

    return [
        VariantGroup(name=name, spellings=frozenset(members))
        for name, members in (slot for slot in slots if slot is not None)
    ]


class VariantDictionary:
    """Read-only index from normalized spelling to its variant group.

    Built once from raw spelling groups and never changed afterwards, so one
    instance can be shared by any number of concurrent evaluations. Use
    :meth:`merged_with` to derive a dictionary with extra groups.
    """

    __slots__ = ("_groups", "_index")

    def __init__(self, groups: Iterable[Iterable[str]] = ()):
        merged = _merge_groups(groups)
        object.__setattr__(self, "_groups", MappingProxyType({g.name: g for g in merged}))
        object.__setattr__(
            self,
            "_index",
            MappingProxyType({s: g.name for g in merged for s in g.spellings}),
        )

    def __setattr__(self, name, value):
        raise AttributeError("VariantDictionary is read-only")

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[VariantGroup]:
        return iter(self._groups.values())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._index

    def __repr__(self) -> str:
        return f"VariantDictionary({len(self._groups)} groups, {len(self._index)} spellings)"

    def group_name(self, word: str) -> str | None:
        """Return the name of the group holding a normalized word, if any."""
        return self._index.get(word)

    def group_of(self, word: str) -> VariantGroup | None:
        """Return the group holding a normalized word, if any."""
        name = self._index.get(word)
        return self._groups[name] if name is not None else None

    def same_group(self, a: str, b: str) -> bool:
        """Check whether two normalized words are interchangeable spellings.

        Identical words always count; otherwise both must resolve to the same
        group. The result does not depend on argument order.
        """
        if a == b:
            return True
        group_a = self._index.get(a)
        return group_a is not None and group_a == self._index.get(b)

    def merged_with(self, groups: Iterable[Iterable[str]]) -> VariantDictionary:
        """Return a new dictionary with extra groups merged in."""
        # Existing groups go first so their names win any merge
        existing = [(g.name, *sorted(g.spellings - {g.name})) for g in self]
        return VariantDictionary([*existing, *groups])
