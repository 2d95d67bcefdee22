"""
Process-wide register of the configured parametric families.

Families are registered once by :func:`~exactdist.families.configuration.configure_families_register`
and looked up by :class:`~exactdist.types.FamilyName` afterwards. The convenience
classes (``FDistribution``, ``HypergeometricDistribution``) resolve their family
through this register, so every instance of a family shares one definition.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import ClassVar

    from exactdist.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """
    Singleton mapping family names to :class:`ParametricFamily` objects.

    ``ParametricFamilyRegister()`` always returns the same object until
    :meth:`_reset` drops it. Lookups and registration are also available as
    class methods.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        instance = cls._instance
        if instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return instance

    def __contains__(self, name: object) -> bool:
        return name in self._families

    def __iter__(self) -> Iterator[str]:
        return iter(self._families)

    def __len__(self) -> int:
        return len(self._families)

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Look up a registered family.

        Raises
        ------
        ValueError
            If ``name`` was never registered.
        """
        families = cls()._families
        try:
            return families[name]
        except KeyError:
            known = ", ".join(sorted(families)) or "none"
            raise ValueError(f"No family {name} found in register (known: {known})") from None

    @classmethod
    def contains(cls, name: str) -> bool:
        """``True`` if a family called ``name`` is registered."""
        return name in cls()

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add ``family`` under its own name.

        Raises
        ------
        ValueError
            If the name is taken; families are never replaced silently.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family {family.name} already found in register")
        families[family.name] = family

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
