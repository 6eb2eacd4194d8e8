"""Unit tests for narration.

Tests cover:
- Verb agreement and pronouns
- Rendering nouns known, unknown, proper and personal
- Relationship phrases
- Status mentions
- Environment listings
"""

from menu_adventures.content import Person
from menu_adventures.engine.domains import REACHABLE
from menu_adventures.engine.narration import (
    capitalize,
    mention_status,
    print_environment,
    pronoun_for,
    relationship_as_verb,
    render_noun,
    string_relationship_to,
    subject_to_verb,
)
from menu_adventures.models.grammar import (
    BE,
    CARRYING,
    CONTAINING,
    SUPPORTING,
    WEARING,
    WEST,
)
from menu_adventures.models.nouns import GrammaticalPerson, Noun


class TestGrammar:
    """Tests for agreement and pronouns."""

    def test_subject_to_verb(self) -> None:
        """Only third person singular subjects take the -s form."""
        assert subject_to_verb(Noun(name="box"), BE) == "is"
        assert subject_to_verb(Noun(name="boxes", plural=True), BE) == "are"
        assert (
            subject_to_verb(Noun(name="me", grammatical_person=GrammaticalPerson.SECOND), BE)
            == "are"
        )
        assert subject_to_verb(Noun(name="box"), CONTAINING.verb) == "contains"
        assert subject_to_verb(Noun(name="Bob"), CARRYING.verb) == "carries"

    def test_pronouns(self) -> None:
        """Pronouns follow person, number and case."""
        me = Noun(name="me", grammatical_person=GrammaticalPerson.FIRST)
        us = Noun(name="us", grammatical_person=GrammaticalPerson.FIRST, plural=True)
        you = Noun(name="you", grammatical_person=GrammaticalPerson.SECOND)

        assert pronoun_for(me) == "I"
        assert pronoun_for(me, is_object=True) == "me"
        assert pronoun_for(us) == "we"
        assert pronoun_for(you) == "you"
        assert pronoun_for(you, is_object=True) == "yourself"
        assert pronoun_for(Noun(name="key")) == "it"
        assert pronoun_for(Noun(name="keys", plural=True)) == "they"
        assert pronoun_for(Noun(name="keys", plural=True), is_object=True) == "them"

    def test_capitalize(self) -> None:
        """Only the first character changes."""
        assert capitalize("the yellow box") == "The yellow box"
        assert capitalize("") == ""


class TestRenderNoun:
    """Tests for render_noun."""

    def test_known_and_unknown(self) -> None:
        """Known nouns take "the", unknown ones their indefinite article."""
        apple = Noun(name="apple", indefinite_article="an")

        assert render_noun(apple) == "the apple"
        assert render_noun(apple, known=False) == "an apple"

    def test_proper_noun(self) -> None:
        """Nouns without an article render bare."""
        bob = Person(name="Bob")

        assert render_noun(bob) == "Bob"
        assert render_noun(bob, known=False) == "Bob"

    def test_personal_nouns_render_as_pronouns(self) -> None:
        """The player is "you", or "yourself" as an object."""
        you = Person(name="matilda", grammatical_person=GrammaticalPerson.SECOND)

        assert render_noun(you) == "you"
        assert render_noun(you, known=False) == "you"
        assert render_noun(you, is_object=True) == "yourself"


class TestRelationships:
    """Tests for relationship phrases."""

    def test_phrases(self) -> None:
        """Each built-in relationship describes the child relative to the parent."""
        box = Noun(name="yellow box")
        you = Person(name="matilda", grammatical_person=GrammaticalPerson.SECOND)
        bob = Person(name="Bob")

        assert string_relationship_to("the key", CONTAINING, box) == "the key in the yellow box"
        assert string_relationship_to("the cup", SUPPORTING, box) == "the cup on the yellow box"
        assert (
            string_relationship_to("the lamp", CARRYING, you)
            == "the lamp that you are carrying"
        )
        assert string_relationship_to("the hat", WEARING, bob) == "the hat that Bob is wearing"

    def test_relationship_as_verb(self) -> None:
        """Headings agree with the parent; directions are used as is."""
        assert relationship_as_verb(Noun(name="box"), CONTAINING) == "contains"
        assert (
            relationship_as_verb(
                Noun(name="me", grammatical_person=GrammaticalPerson.SECOND), CARRYING
            )
            == "carry"
        )
        assert relationship_as_verb(Noun(name="room"), WEST) == "west"


class TestMentionStatus:
    """Tests for mention_status."""

    def test_plain_noun(self, three_rooms) -> None:
        """Nouns without capabilities have no status."""
        assert mention_status(three_rooms.table) == ""

    def test_locked_wins_over_closed(self, three_rooms) -> None:
        """A locked door is only called locked."""
        assert mention_status(three_rooms.yellow_door) == " (locked)"

        three_rooms.yellow_door.lockable.locked = False
        assert mention_status(three_rooms.yellow_door) == " (closed)"

        three_rooms.yellow_door.openable.closed = False
        assert mention_status(three_rooms.yellow_door) == ""

    def test_switch(self, three_rooms) -> None:
        """Switchable things show whether they are on."""
        assert mention_status(three_rooms.lamp) == " (off)"

        three_rooms.lamp.switchable.on = True
        assert mention_status(three_rooms.lamp) == " (on)"


class TestPrintEnvironment:
    """Tests for print_environment."""

    def test_starting_room(self, three_rooms) -> None:
        """The listing shows the description, the contents and the door."""
        print_environment(three_rooms.universe)

        assert three_rooms.interface.transcript == (
            "A non-descript room\n"
            "\n"
            "A:\n"
            "  contains:\n"
            "    you\n"
            "    a car\n"
            "    a blue table\n"
            "    a hat\n"
            "    an apple\n"
            "    a lamp (off)\n"
            "  west:\n"
            "    a yellow door (locked)\n"
        )

    def test_nested_listing(self, three_rooms) -> None:
        """Children are listed below their parent, further in."""
        world = three_rooms
        world.universe.set_relationship(world.room_b, world.you, CONTAINING)
        world.yellow_box.openable.closed = False
        world.lamp.switchable.on = True
        world.universe.set_relationship(world.room_b, world.lamp, CONTAINING)

        print_environment(world.universe)

        assert world.interface.transcript == (
            "B:\n"
            "  contains:\n"
            "    a yellow box:\n"
            "      contains:\n"
            "        a yellow key\n"
            "        a red key\n"
            "    you\n"
            "    a lamp (on)\n"
        )

    def test_player_is_not_expanded(self, three_rooms) -> None:
        """What the player carries is left to the inventory listing."""
        world = three_rooms
        world.universe.set_relationship(world.you, world.hat, CARRYING)

        print_environment(world.universe)

        assert "    you\n" in world.interface.transcript
        assert "a hat" not in world.interface.transcript

    def test_transparent_car_shows_passenger(self, three_rooms) -> None:
        """Sitting in the glass car, the room is listed with the player inside the car."""
        world = three_rooms
        world.universe.set_relationship(world.car, world.you, CONTAINING)

        print_environment(world.universe)

        assert "    a car:\n      contains:\n        you\n" in world.interface.transcript

    def test_other_domain(self, three_rooms) -> None:
        """Listing through Reachable hides what is in a closed transparent box."""
        world = three_rooms
        world.universe.set_relationship(world.room_b, world.you, CONTAINING)
        world.yellow_box.transparent = True

        print_environment(world.universe, REACHABLE)

        assert "yellow key" not in world.interface.transcript
