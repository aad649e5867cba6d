from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Top-level technique classification. Declared in display order."""

    SUBMISSION = "submission"
    POSITION = "position"
    GUARD = "guard"
    GUARD_PASS = "guard-pass"
    SWEEP = "sweep"
    TAKEDOWN = "takedown"
    ESCAPE = "escape"
    BACK_TAKE = "back-take"


class Subcategory(str, Enum):
    CHOKE = "choke"
    JOINT_LOCK = "joint-lock"
    LEG_LOCK = "leg-lock"
    SPINE_LOCK = "spine-lock"
    DOMINANT_POSITION = "dominant-position"
    DEFENSIVE_POSITION = "defensive-position"
    OPEN_GUARD = "open-guard"
    CLOSED_GUARD = "closed-guard"
    HALF_GUARD = "half-guard"
    WRESTLING = "wrestling"
    JUDO = "judo"
    POSITION_ESCAPE = "position-escape"
    SUBMISSION_ESCAPE = "submission-escape"


class Difficulty(str, Enum):
    FUNDAMENTAL = "fundamental"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Position(str, Enum):
    CLOSED_GUARD = "closed-guard"
    OPEN_GUARD = "open-guard"
    HALF_GUARD = "half-guard"
    MOUNT = "mount"
    SIDE_CONTROL = "side-control"
    BACK_CONTROL = "back-control"
    KNEE_ON_BELLY = "knee-on-belly"
    NORTH_SOUTH = "north-south"
    TURTLE = "turtle"
    STANDING = "standing"
    GUARD_TOP = "guard-top"
    MULTIPLE = "multiple"


CATEGORY_LABELS = {
    Category.SUBMISSION: ("Submissions", "Techniques that force an opponent to tap out"),
    Category.POSITION: ("Positions", "Dominant and neutral positions for control"),
    Category.GUARD: ("Guard Types", "Defensive positions using legs to control"),
    Category.GUARD_PASS: ("Guard Passes", "Getting past opponent's legs to dominant position"),
    Category.SWEEP: ("Sweeps", "Reversing from bottom to top position"),
    Category.TAKEDOWN: ("Takedowns & Throws", "Taking opponent from standing to ground"),
    Category.ESCAPE: ("Escapes", "Getting out of bad positions"),
    Category.BACK_TAKE: ("Back Takes", "Transitioning to back control"),
}

DIFFICULTY_LABELS = {
    Difficulty.FUNDAMENTAL: ("Fundamental", "White Belt"),
    Difficulty.INTERMEDIATE: ("Intermediate", "Blue-Purple Belt"),
    Difficulty.ADVANCED: ("Advanced", "Brown-Black Belt"),
}

POSITION_LABELS = {
    Position.CLOSED_GUARD: "Closed Guard",
    Position.OPEN_GUARD: "Open Guard",
    Position.HALF_GUARD: "Half Guard",
    Position.MOUNT: "Mount",
    Position.SIDE_CONTROL: "Side Control",
    Position.BACK_CONTROL: "Back Control",
    Position.KNEE_ON_BELLY: "Knee on Belly",
    Position.NORTH_SOUTH: "North-South",
    Position.TURTLE: "Turtle",
    Position.STANDING: "Standing",
    Position.GUARD_TOP: "Guard (Top)",
    Position.MULTIPLE: "Multiple Positions",
}


def _optional_tuple(values) -> Optional[tuple]:
    if values is None:
        return None
    return tuple(values)


def _optional_enum(enum_type, value):
    if value is None:
        return None
    return enum_type(value)


@dataclass(frozen=True)
class Technique:
    """One entry of the technique library.

    Optional fields are None when the record does not carry them. An empty
    tuple or ``points=0`` is a real value, not "unset".
    """

    id: str
    name: str
    category: Category
    difficulty: Difficulty
    description: str
    gi_legal: bool
    no_gi_legal: bool
    aliases: Optional[tuple[str, ...]] = None
    subcategory: Optional[Subcategory] = None
    key_points: Optional[tuple[str, ...]] = None
    starting_position: Optional[Position] = None
    ending_position: Optional[Position] = None
    points: Optional[int] = None
    belt_restrictions: Optional[str] = None
    related_techniques: Optional[tuple[str, ...]] = None
    video_url: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("technique id must not be empty")
        if not self.name:
            raise ValueError(f"technique {self.id!r} has no name")
        if not self.description:
            raise ValueError(f"technique {self.id!r} has no description")
        if self.points is not None and self.points < 0:
            raise ValueError(f"technique {self.id!r} has negative points: {self.points}")

    @classmethod
    def from_dict(cls, technique_id: str, category: str, raw: dict) -> "Technique":
        """Build a record from the raw data layout used in techniques_data.

        Raises ValueError for any value outside the closed sets.
        """
        return cls(
            id=technique_id,
            name=raw["name"],
            category=Category(category),
            difficulty=Difficulty(raw["difficulty"]),
            description=raw["description"],
            gi_legal=bool(raw.get("gi_legal", False)),
            no_gi_legal=bool(raw.get("no_gi_legal", False)),
            aliases=_optional_tuple(raw.get("aliases")),
            subcategory=_optional_enum(Subcategory, raw.get("subcategory")),
            key_points=_optional_tuple(raw.get("key_points")),
            starting_position=_optional_enum(Position, raw.get("starting_position")),
            ending_position=_optional_enum(Position, raw.get("ending_position")),
            points=raw.get("points"),
            belt_restrictions=raw.get("belt_restrictions"),
            related_techniques=_optional_tuple(raw.get("related_techniques")),
            video_url=raw.get("video_url"),
        )

    def to_dict(self) -> dict:
        """JSON-ready mapping with the field names used by existing exports."""
        data = {
            "id": self.id,
            "name": self.name,
            "aliases": list(self.aliases) if self.aliases is not None else None,
            "category": self.category.value,
            "subcategory": self.subcategory.value if self.subcategory else None,
            "difficulty": self.difficulty.value,
            "description": self.description,
            "keyPoints": list(self.key_points) if self.key_points is not None else None,
            "startingPosition": self.starting_position.value if self.starting_position else None,
            "endingPosition": self.ending_position.value if self.ending_position else None,
            "giLegal": self.gi_legal,
            "noGiLegal": self.no_gi_legal,
            "points": self.points,
            "beltRestrictions": self.belt_restrictions,
            "relatedTechniques": (
                list(self.related_techniques) if self.related_techniques is not None else None
            ),
            "videoUrl": self.video_url,
        }
        return {key: value for key, value in data.items() if value is not None}

    def rule_sets(self) -> list[str]:
        rule_sets = []
        if self.gi_legal:
            rule_sets.append("gi")
        if self.no_gi_legal:
            rule_sets.append("no-gi")
        return rule_sets

    def search_fields(self) -> list[str]:
        fields = [self.name, self.description]
        fields.extend(self.aliases or ())
        fields.extend(self.key_points or ())
        return fields
