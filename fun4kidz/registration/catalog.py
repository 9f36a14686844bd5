"""Program catalog and fee rules.

Static configuration only: the closed set of programs, their pricing, the flat
membership/registration fees, and the closed option sets used by the
registration form (card types, US states).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional, Tuple


class ProgramId(str, Enum):
    AFTER_SCHOOL = "after-school"
    LEGO_ROBOTICS = "lego-robotics"
    HOMESCHOOLING = "homeschooling"
    LEARN_PLAY = "learn-play"


class PricingMode(str, Enum):
    PER_WEEK = "per-week"
    PER_SESSION = "per-session"

    @property
    def unit(self) -> str:
        return "week" if self is PricingMode.PER_WEEK else "session"

    @property
    def rate_label(self) -> str:
        return "Weekly Rate" if self is PricingMode.PER_WEEK else "Session"


class Tone(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    YELLOW = "yellow"
    INDIGO = "indigo"
    PINK = "pink"
    CYAN = "cyan"
    ORANGE = "orange"
    TEAL = "teal"
    RED = "red"


@dataclass(frozen=True)
class ToneStyle:
    badge: str
    selected: str
    accent: str


# One row per tone; templates only ever read from this table.
TONE_STYLES: Dict[Tone, ToneStyle] = {
    Tone.BLUE: ToneStyle("badge badge-blue", "option-selected option-blue", "accent-blue"),
    Tone.GREEN: ToneStyle("badge badge-green", "option-selected option-green", "accent-green"),
    Tone.PURPLE: ToneStyle("badge badge-purple", "option-selected option-purple", "accent-purple"),
    Tone.YELLOW: ToneStyle("badge badge-yellow", "option-selected option-yellow", "accent-yellow"),
    Tone.INDIGO: ToneStyle("badge badge-indigo", "option-selected option-indigo", "accent-indigo"),
    Tone.PINK: ToneStyle("badge badge-pink", "option-selected option-pink", "accent-pink"),
    Tone.CYAN: ToneStyle("badge badge-cyan", "option-selected option-cyan", "accent-cyan"),
    Tone.ORANGE: ToneStyle("badge badge-orange", "option-selected option-orange", "accent-orange"),
    Tone.TEAL: ToneStyle("badge badge-teal", "option-selected option-teal", "accent-teal"),
    Tone.RED: ToneStyle("badge badge-red", "option-selected option-red", "accent-red"),
}


@dataclass(frozen=True)
class Badge:
    text: str
    tone: Tone

    @property
    def css_class(self) -> str:
        return TONE_STYLES[self.tone].badge


@dataclass(frozen=True)
class Program:
    id: ProgramId
    name: str
    breakdown_name: str
    mode: PricingMode
    rate: Decimal
    tone: Tone
    add_on_fee: Optional[Decimal] = None
    badges: Tuple[Badge, ...] = field(default_factory=tuple)

    @property
    def description(self) -> str:
        """Price summary shown next to the program checkbox."""
        text = f"${self.rate:,.0f}/{self.mode.unit} per child"
        if self.add_on_fee is not None:
            text += f" + ${self.add_on_fee:,.0f} registration"
        return text + " + Membership Fees"

    @property
    def price_label(self) -> str:
        return f"${self.rate:,.0f}/{self.mode.unit}"

    def per_child_hint(self, children_count: int) -> Optional[str]:
        """e.g. "$270/week for 2 children"; nothing for a single child."""
        if children_count <= 1:
            return None
        return f"${self.rate * children_count:,.0f}/{self.mode.unit} for {children_count} children"

    @property
    def style(self) -> ToneStyle:
        return TONE_STYLES[self.tone]


MEMBERSHIP_FEE = Decimal("5.00")
REGISTRATION_FEE = Decimal("20.00")
BASE_FEES_TOTAL = MEMBERSHIP_FEE + REGISTRATION_FEE

MEMBERSHIP_FEE_LABEL = "Annual Membership Fee"
MEMBERSHIP_TONE = Tone.ORANGE
REGISTRATION_FEE_LABEL = "Registration Fee"


PROGRAMS: Dict[ProgramId, Program] = {
    ProgramId.AFTER_SCHOOL: Program(
        id=ProgramId.AFTER_SCHOOL,
        name="After School Care Program",
        breakdown_name="After School Care",
        mode=PricingMode.PER_WEEK,
        rate=Decimal("135.00"),
        add_on_fee=Decimal("75.00"),
        tone=Tone.BLUE,
        badges=(
            Badge("School Pickup", Tone.BLUE),
            Badge("Homework Help", Tone.GREEN),
            Badge("STEM Activities", Tone.PURPLE),
        ),
    ),
    ProgramId.LEGO_ROBOTICS: Program(
        id=ProgramId.LEGO_ROBOTICS,
        name="Lego Robotics Workshop",
        breakdown_name="Lego Robotics Workshop",
        mode=PricingMode.PER_SESSION,
        rate=Decimal("80.00"),
        tone=Tone.GREEN,
        badges=(
            Badge("STEM Learning", Tone.GREEN),
            Badge("Team Building", Tone.YELLOW),
            Badge("Problem Solving", Tone.INDIGO),
        ),
    ),
    ProgramId.HOMESCHOOLING: Program(
        id=ProgramId.HOMESCHOOLING,
        name="Homeschooling Program",
        breakdown_name="Homeschooling Program",
        mode=PricingMode.PER_WEEK,
        rate=Decimal("200.00"),
        tone=Tone.PURPLE,
        badges=(
            Badge("Group Learning", Tone.PURPLE),
            Badge("Flexible Schedule", Tone.PINK),
            Badge("Custom Curriculum", Tone.CYAN),
        ),
    ),
    ProgramId.LEARN_PLAY: Program(
        id=ProgramId.LEARN_PLAY,
        name="Learn & Play Program",
        breakdown_name="Learn & Play Program",
        mode=PricingMode.PER_WEEK,
        rate=Decimal("120.00"),
        tone=Tone.PINK,
        badges=(
            Badge("Interactive Learning", Tone.PINK),
            Badge("Creative Play", Tone.ORANGE),
            Badge("Age Appropriate", Tone.TEAL),
        ),
    ),
}

PROGRAM_IDS: Tuple[str, ...] = tuple(p.value for p in ProgramId)


def get_program(program_id: str) -> Optional[Program]:
    try:
        return PROGRAMS[ProgramId(program_id)]
    except (ValueError, TypeError):
        return None


def catalog_order(program_ids) -> list[str]:
    """Known ids, deduplicated, in catalog order."""
    wanted = set(program_ids)
    return [pid for pid in PROGRAM_IDS if pid in wanted]


CARD_TYPES: Dict[str, str] = {
    "visa": "Visa",
    "mastercard": "Mastercard",
    "amex": "American Express",
    "discover": "Discover",
}

US_STATES: Dict[str, str] = {
    "AL": "Alabama",
    "AK": "Alaska",
    "AZ": "Arizona",
    "AR": "Arkansas",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DE": "Delaware",
    "FL": "Florida",
    "GA": "Georgia",
    "HI": "Hawaii",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "IA": "Iowa",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "ME": "Maine",
    "MD": "Maryland",
    "MA": "Massachusetts",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MS": "Mississippi",
    "MO": "Missouri",
    "MT": "Montana",
    "NE": "Nebraska",
    "NV": "Nevada",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NY": "New York",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VT": "Vermont",
    "VA": "Virginia",
    "WA": "Washington",
    "WV": "West Virginia",
    "WI": "Wisconsin",
    "WY": "Wyoming",
}
