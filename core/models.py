# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows through the tool catalog:
#
#   ChatMessage        one role-tagged instruction sent to the backend
#   GenerationOptions  max output length + temperature, fixed per tool
#   StyleCatalog       closed category key → instruction phrase table
#   CountBounds        the [1, max] range of a "count"/"length" argument
#   Monkey             one record of the cached roster
#
# Nothing here talks to the network or to an LLM.  The catalog modules
# (core/catalogs.py) build one frozen instance of these per tool at import
# time and never mutate them.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


# Role tags understood by every completion backend.
SYSTEM = "system"   # persona / instruction message, always first
USER = "user"       # the task plus the caller's content, always second


# -----------------------------------------------------------------------------
# ChatMessage — one entry of the two-message instruction set
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ChatMessage:
    """A single role-tagged message handed to a completion backend."""

    role: str                          # SYSTEM or USER
    text: str


# -----------------------------------------------------------------------------
# GenerationOptions — bounded output length and randomness
# -----------------------------------------------------------------------------
# Analytical tools run cold (0.2–0.4), creative tools run warm (0.6–0.8).
# Callers never see or change these; they belong to the tool.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GenerationOptions:
    """Generation limits for one tool."""

    max_tokens: int                    # Maximum output length, must be > 0
    temperature: float                 # Randomness, must be within [0.0, 1.0]

    def __post_init__(self) -> None:
        if self.max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be within [0.0, 1.0], got {self.temperature}")


# -----------------------------------------------------------------------------
# StyleCatalog — closed set of categories for a tool argument
# -----------------------------------------------------------------------------
# Lookup is case-insensitive and never fails: anything outside the set
# resolves to the default key, so "banana" behaves exactly like omitting the
# argument.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class StyleCatalog:
    """Immutable mapping from a category key to an instruction phrase.

    ``entries`` must contain ``default``; keys are stored lower-case.
    """

    default: str
    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.default not in self.entries:
            raise ValueError(f"default key {self.default!r} missing from catalog entries")

    def key_for(self, value: Optional[str]) -> str:
        """Return the canonical key for ``value`` (the default when unknown)."""
        key = (value or "").lower()
        return key if key in self.entries else self.default

    def instruction(self, value: Optional[str]) -> str:
        """Return the instruction phrase ``value`` resolves to."""
        return self.entries[self.key_for(value)]

    @property
    def keys(self) -> list[str]:
        return list(self.entries)


# -----------------------------------------------------------------------------
# CountBounds — silent clamp for "how many" arguments
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CountBounds:
    """Accepted range ``[1, maximum]`` for a count, with its fallback."""

    default: int
    maximum: int

    def clamp(self, value: int) -> int:
        """Out-of-range values (<= 0 or > maximum) become the default."""
        if value <= 0 or value > self.maximum:
            return self.default
        return value


# -----------------------------------------------------------------------------
# Monkey — one record of the roster served by core/monkeys.py
# -----------------------------------------------------------------------------
# The remote feed spells its keys "Name", "Location", ... ; other feeds use
# lower case.  from_dict() accepts either.
# -----------------------------------------------------------------------------
@dataclass
class Monkey:
    """A named roster record.  Identity is ``name``, compared case-insensitively."""

    name: str
    location: str = ""
    details: str = ""
    image: str = ""
    population: int = 0
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["Monkey"]:
        """Build a Monkey from one JSON object, or None if it has no name."""
        fields = {str(key).lower(): value for key, value in data.items()}
        name = fields.get("name")
        if not isinstance(name, str):
            return None
        return cls(
            name=name,
            location=_as_str(fields.get("location")),
            details=_as_str(fields.get("details")),
            image=_as_str(fields.get("image")),
            population=_as_int(fields.get("population")),
            latitude=_as_float(fields.get("latitude")),
            longitude=_as_float(fields.get("longitude")),
        )

    def matches(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "location": self.location,
            "details": self.details,
            "image": self.image,
            "population": self.population,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0
