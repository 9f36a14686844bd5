"""Marketing copy for the home and programs pages.

Prices shown here are read from the catalog so the pages never disagree with
the registration total.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from fun4kidz.registration.catalog import PROGRAMS, ProgramId, Tone, ToneStyle, TONE_STYLES

BUSINESS_NAME = "Fun4KidZ"
TAGLINE = "Nurturing young minds through innovative programs that combine learning, creativity, and fun."

CONTACT_INFO = (
    ("Phone", "(555) 123-4567"),
    ("Email", "info@fun4kidz.com"),
    ("Location", "123 Learning Lane, Education City, EC 12345"),
)

NAV_LINKS = (
    ("Home", "ui.home"),
    ("Programs", "ui.programs_page"),
    ("Register", "ui.register_page"),
)


@dataclass(frozen=True)
class HomeProgram:
    program_id: ProgramId
    title: str
    description: str
    features: Tuple[str, ...]

    @property
    def price(self) -> str:
        return PROGRAMS[self.program_id].price_label

    @property
    def style(self) -> ToneStyle:
        return PROGRAMS[self.program_id].style


HOME_PROGRAMS = (
    HomeProgram(
        ProgramId.AFTER_SCHOOL,
        "After School Care",
        "STEM Lego & Gymnastics",
        (
            "STEM-focused activities",
            "Lego building challenges",
            "Physical fitness & gymnastics",
            "Homework assistance",
            "Healthy snacks included",
        ),
    ),
    HomeProgram(
        ProgramId.LEGO_ROBOTICS,
        "Lego Robotics",
        "Workshops & Competitions",
        (
            "Build & program robots",
            "Problem-solving skills",
            "Team collaboration",
            "Competition preparation",
            "Advanced STEM concepts",
        ),
    ),
    HomeProgram(
        ProgramId.HOMESCHOOLING,
        "Homeschooling",
        "Personalized Education",
        (
            "Customized curriculum",
            "One-on-one attention",
            "Flexible scheduling",
            "Progress tracking",
            "Parent collaboration",
        ),
    ),
    HomeProgram(
        ProgramId.LEARN_PLAY,
        "Learn & Play",
        "Early Childhood Development",
        (
            "Age-appropriate activities",
            "Social skill development",
            "Creative arts & crafts",
            "Music & movement",
            "Pre-school preparation",
        ),
    ),
)


@dataclass(frozen=True)
class Feature:
    title: str
    description: str
    tone: Tone

    @property
    def style(self) -> ToneStyle:
        return TONE_STYLES[self.tone]


FEATURES = (
    Feature("Expert Staff", "Certified educators with years of experience in child development", Tone.BLUE),
    Feature("STEM Focus", "Cutting-edge STEM programs that prepare kids for the future", Tone.GREEN),
    Feature("Flexible Hours", "Programs designed to fit your family's busy schedule", Tone.PURPLE),
    Feature("Safe Environment", "Secure, nurturing space where children can learn and grow", Tone.PINK),
)

STATS = (
    ("500+", "Happy Families"),
    ("4.9", "Average Rating"),
    ("10+", "Years Experience"),
)

TESTIMONIALS = (
    (
        "Sarah M.",
        "Parent of Emma, Age 8",
        "My daughter loves the STEM activities! She's learned so much about robotics and problem-solving. "
        "The staff is amazing and really cares about each child.",
    ),
    (
        "Michael R.",
        "Parent of Jake, Age 10",
        "The homeschooling program has been perfect for our family. The personalized attention and "
        "flexible schedule work great with our lifestyle.",
    ),
    (
        "Lisa K.",
        "Parent of Alex, Age 7",
        "Fun4KidZ has been a game-changer for our after-school routine. My son is engaged, learning, "
        "and having fun every day!",
    ),
)


@dataclass(frozen=True)
class Highlight:
    title: str
    description: str
    tone: Tone

    @property
    def style(self) -> ToneStyle:
        return TONE_STYLES[self.tone]


@dataclass(frozen=True)
class ProgramPage:
    program_id: ProgramId
    title: str
    subtitle: str
    badges: Tuple[str, ...]
    overview_heading: str
    description: Optional[str]
    features: Tuple[str, ...]
    side_heading: str
    details: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()
    special_note: Optional[Tuple[str, str]] = None
    highlights_intro: Optional[str] = None
    highlights: Tuple[Highlight, ...] = field(default_factory=tuple)
    show_price: bool = False
    button_text: str = "Register Now"

    @property
    def program(self):
        return PROGRAMS[self.program_id]

    @property
    def price(self) -> str:
        return self.program.price_label

    @property
    def add_on_text(self) -> Optional[str]:
        fee = self.program.add_on_fee
        if fee is None:
            return None
        return f"${fee:,.0f} Registration Fee per family"


PROGRAM_PAGES = (
    ProgramPage(
        program_id=ProgramId.AFTER_SCHOOL,
        title="After School Care",
        subtitle="Comprehensive care from school dismissal until 6 PM",
        badges=("School Pickup Available", "Homework Help", "STEM Activities"),
        overview_heading="Why Choose Fun4KidZ After School Care?",
        description="Comprehensive care from school dismissal until 6 PM",
        features=(
            "We love what we do and it shows. We are a family friendly, community oriented business "
            "who cares about our customers and their families.",
            "We pack a lot of fun into just a few hours! We have homework help, outside time, character "
            "building activities, STEM Lego Robotics and crafts!",
            "Our program is open from school dismissal until 6 PM. We are open on school holidays and "
            "early release days!",
        ),
        side_heading="Program Details - 25/26 School Year",
        details=(
            ("Pickup Available From:", ("Bluffton Elementary School", "Okatie Elementary", "River Ridge Academy")),
            ("Hours:", ("School Pick up - 6 PM",)),
        ),
        special_note=(
            "Special Discounts Available",
            "We offer discounts for military personnel and first responders",
        ),
        show_price=True,
        button_text="Register for 25/26 School Year",
    ),
    ProgramPage(
        program_id=ProgramId.LEGO_ROBOTICS,
        title="Lego Robotics",
        subtitle="STEM learning through fun robotics challenges",
        badges=("STEM Learning", "Team Building", "Problem Solving"),
        overview_heading="Program Overview",
        description=(
            "Our Lego Robotics programs are built around fun and exciting challenges that strengthen your "
            "child's grasp of Science, Technology, Engineering, and Math concepts. Your child will also "
            "develop team-building skills as they discover more about the world of robotics and computer "
            "programming."
        ),
        features=(
            "Strengthen STEM concepts through hands-on learning",
            "Develop team-building and collaboration skills",
            "Learn robot design and computer programming",
        ),
        side_heading="Exciting Challenges",
        highlights_intro=(
            "Our goal is to help the next generation learn how to make a difference in their world using "
            "robot design and computer programming to solve problems like:"
        ),
        highlights=(
            Highlight("Finding Buried Treasure", "Navigate and search missions", Tone.GREEN),
            Highlight("Exploring Mars", "Space exploration challenges", Tone.RED),
            Highlight("Programming a Recycling Bot", "Environmental problem solving", Tone.BLUE),
        ),
        button_text="Enroll in Lego Robotics",
    ),
    ProgramPage(
        program_id=ProgramId.HOMESCHOOLING,
        title="Homeschool Programs",
        subtitle="Specialized programs for homeschool groups",
        badges=("Group Learning", "STEM Focus", "Flexible Scheduling"),
        overview_heading="Program Benefits",
        description=(
            "Fun4KidZ StemLego is proud to offer programs for homeschool groups, which can add variety and "
            "exciting new concepts to your classroom. You can rest easy knowing that your child will "
            "participate in relevant, fun, and challenging projects that are specially designed to enhance "
            "their skills and knowledge."
        ),
        features=(
            "Add variety and excitement to your homeschool curriculum",
            "Relevant, fun, and challenging projects",
            "Specially designed to enhance skills and knowledge",
        ),
        side_heading="What We Offer",
        highlights=(
            Highlight("STEM Lego Activities", "Hands-on science, technology, engineering, and math learning", Tone.PURPLE),
            Highlight("Group Learning Environment", "Social interaction and collaborative learning opportunities", Tone.INDIGO),
            Highlight("Flexible Scheduling", "Programs designed to fit your homeschool schedule", Tone.PINK),
            Highlight("Skill Enhancement", "Targeted activities to develop specific competencies", Tone.GREEN),
        ),
        button_text="Join Our Homeschool Program",
    ),
)
