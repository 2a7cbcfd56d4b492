"""Danger zone lookup.

The processor only depends on the ZoneLookup contract: given a duty station,
answer whether it is a danger zone. Implementations may be backed by a static
list, a geo-service or a remote call. StaticZoneLookup covers the common case
of a configured list of stations (profile.yaml pay_policy.danger_zones).

Usage:
    from salaryslip.sdk.zones import StaticZoneLookup, load_zone_lookup

    lookup = StaticZoneLookup(["Ukraine", "South Sudan"])
    lookup.is_danger_zone("ukraine")  # True

    lookup = load_zone_lookup()  # from the active profile
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .config import load_pay_policy
from .schemas import PayPolicy

logger = logging.getLogger(__name__)


class ZoneLookup(ABC):
    """Answers whether a duty station is a danger zone."""

    @abstractmethod
    def is_danger_zone(self, duty_station: Optional[str]) -> bool:
        """Return True if duty_station is classified as a danger zone.

        Args:
            duty_station: Work location identifier (may be None)

        Returns:
            True for a danger zone, False otherwise
        """
        raise NotImplementedError


def _normalize_station(duty_station: Optional[str]) -> str:
    return (duty_station or "").strip().casefold()


class StaticZoneLookup(ZoneLookup):
    """Zone lookup backed by a fixed set of station names.

    Matching ignores case and surrounding whitespace. The set is built once
    and never modified, so concurrent lookups are safe.
    """

    def __init__(self, zones: Iterable[str]):
        # A bare str would iterate as single letters
        if isinstance(zones, str):
            raise TypeError(
                f"zones must be an iterable of station names, not a str: {zones!r}"
            )
        self._zones = frozenset(
            _normalize_station(zone) for zone in zones if _normalize_station(zone)
        )

    @property
    def zones(self) -> frozenset:
        """Normalized danger zone names."""
        return self._zones

    def is_danger_zone(self, duty_station: Optional[str]) -> bool:
        station = _normalize_station(duty_station)
        if not station:
            return False
        return station in self._zones

    def __repr__(self) -> str:
        return f"StaticZoneLookup({sorted(self._zones)!r})"


def load_zone_lookup(policy: Optional[PayPolicy] = None) -> StaticZoneLookup:
    """Build a StaticZoneLookup from a pay policy.

    Args:
        policy: Pay policy to read danger_zones from. Loaded from the
                active profile when not given.

    Returns:
        StaticZoneLookup over policy.danger_zones
    """
    if policy is None:
        policy = load_pay_policy()

    lookup = StaticZoneLookup(policy.danger_zones)
    logger.debug(f"Loaded {len(lookup.zones)} danger zone(s)")
    return lookup
