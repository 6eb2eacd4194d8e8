"""
Domain resolver - the search spaces sentence arguments come from.

Each domain walks the world graph from its own origin and returns the
candidates the current action could take right now, as Answers. When a
parent has several candidates under the same relationship they are
grouped into a Question, so the player narrows them down one menu at a
time:

    Take something
      -> Take the yellow box
      -> Take something in the yellow box
           -> Take the yellow key in the yellow box
           -> Take the red key in the yellow box

Blocking rules decide which containment edges a domain can see through.
By default a closed container blocks what it contains; Visible
additionally lets transparent containers through.

Domains:
    - REACHABLE: what the player can touch from where they are
    - VISIBLE: what the player can see; nothing in darkness
    - INVENTORY: what the player carries
    - OUTFIT: what the player wears
    - IMMEDIATE: what sits next to the mover, for getting into or onto
    - EXIT_DIRECTIONS: the ways out of the mover's location
    - DIALOG: the lines the player could say to a chosen addressee
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from menu_adventures.engine.narration import render_noun, string_relationship_to
from menu_adventures.models.answers import Answer, Question, Sentence
from menu_adventures.models.grammar import CARRYING, CONTAINING, WEARING, Relationship
from menu_adventures.models.nouns import Door, Location, Noun

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe

logger = logging.getLogger(__name__)


def answer_for(thing: Noun) -> Answer:
    """A concrete answer naming a noun as the object of a sentence."""
    return Answer(text=render_noun(thing, is_object=True), object=thing)


def append_parent_relationship(answer: Answer, relationship: Relationship, parent: Noun) -> Answer:
    """Qualify an answer, and every answer below it, by where it sits."""
    text = string_relationship_to(answer.text, relationship, parent)
    if isinstance(answer.object, Question):
        question = answer.object
        return Answer(
            text=text,
            object=Question(
                text=string_relationship_to(question.text, relationship, parent),
                answers=[
                    append_parent_relationship(sub_answer, relationship, parent)
                    for sub_answer in question.answers
                ],
            ),
        )
    return Answer(text=text, object=answer.object)


class Domain:
    """A search space for one argument of an action.

    Attributes:
        name: Identifier used in logs and world files
        indefinite: Placeholder for an unresolved argument ("something")
        interrogative: Prompt word for disambiguation ("what")
    """

    name = "domain"
    indefinite = "something"
    interrogative = "what"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def blocking(self, parent: Noun, relationship: Relationship, thing: Noun) -> bool:
        """Whether `parent` hides `thing` from this domain."""
        return relationship == CONTAINING and parent.is_closable_and_closed()

    def origin(self, universe: "Universe") -> tuple[Noun, Relationship]:
        """The noun the search starts from, and the player's relationship to it."""
        return universe.get_parent_relationship(universe.player)

    def find(self, universe: "Universe", sentence: Sentence, lit: bool = True) -> list[Answer]:
        """Candidates for this argument of `sentence`, possible right now."""
        raise NotImplementedError

    def group(self, answers: list[Answer]) -> Answer:
        """One answer standing for several, or the only one."""
        if len(answers) == 1:
            return answers[0]
        return Answer(
            text=self.indefinite,
            object=Question(text=self.interrogative, answers=answers),
        )

    def add_thing_and_relations(
        self,
        answers: list[Answer],
        universe: "Universe",
        sentence: Sentence,
        parent: Noun,
    ) -> None:
        """Collect `parent` and everything unblocked below it.

        Children are grouped by relationship. A group of one is spliced
        in directly; a bigger group becomes a nested Question.
        """
        if sentence.action.possible_now(universe, sentence, self, parent):
            answers.append(answer_for(parent))

        sub_relations: dict[Relationship, list[Answer]] = {}
        for thing, relationship in universe.get_children(parent):
            if not self.blocking(parent, relationship, thing):
                self.add_thing_and_relations(
                    sub_relations.setdefault(relationship, []), universe, sentence, thing
                )

        for relationship, sub_answers in sub_relations.items():
            if sub_answers:
                answers.append(
                    append_parent_relationship(self.group(sub_answers), relationship, parent)
                )

    def add_siblings_and_doors(
        self, answers: list[Answer], universe: "Universe", sentence: Sentence
    ) -> None:
        """Collect from everything sharing the player's origin, plus doors."""
        origin, origin_relationship = self.origin(universe)
        for thing, relationship in universe.get_children(origin):
            if relationship == origin_relationship:
                self.add_thing_and_relations(answers, universe, sentence, thing)
        for location, _ in universe.get_exits(origin):
            if isinstance(location, Door):
                self.add_thing_and_relations(answers, universe, sentence, location)


class Reachable(Domain):
    """Anything the player can touch.

    The player cannot reach outside of whatever they are in or on. In
    darkness they can still feel what they carry and wear.
    """

    name = "reachable"

    def find(self, universe: "Universe", sentence: Sentence, lit: bool = True) -> list[Answer]:
        answers: list[Answer] = []
        if lit:
            self.add_siblings_and_doors(answers, universe, sentence)
        else:
            for thing, _ in universe.get_children(universe.player):
                self.add_thing_and_relations(answers, universe, sentence, thing)
        return answers


class Visible(Domain):
    """Anything the player can see.

    Transparent containers do not block sight even when closed. The
    origin climbs out of every unblocked container until it reaches a
    location, so a player sitting in a glass car still sees the room.
    """

    name = "visible"

    def blocking(self, parent: Noun, relationship: Relationship, thing: Noun) -> bool:
        return super().blocking(parent, relationship, thing) and not parent.transparent

    def origin(self, universe: "Universe") -> tuple[Noun, Relationship]:
        thing = universe.player
        parent, relationship = universe.get_parent_relationship(thing)
        while not isinstance(parent, Location) and not self.blocking(parent, relationship, thing):
            thing = parent
            parent, relationship = universe.get_parent_relationship(thing)
        return parent, relationship

    def find(self, universe: "Universe", sentence: Sentence, lit: bool = True) -> list[Answer]:
        answers: list[Answer] = []
        if lit:
            self.add_siblings_and_doors(answers, universe, sentence)
        return answers


class Inventory(Domain):
    """Things the player carries."""

    name = "inventory"

    def find(self, universe: "Universe", sentence: Sentence, lit: bool = True) -> list[Answer]:
        return [
            answer_for(thing)
            for thing, relationship in universe.get_children(universe.player)
            if relationship == CARRYING
            and sentence.action.possible_now(universe, sentence, self, thing)
        ]


class Outfit(Domain):
    """Things the player wears."""

    name = "outfit"

    def find(self, universe: "Universe", sentence: Sentence, lit: bool = True) -> list[Answer]:
        return [
            answer_for(thing)
            for thing, relationship in universe.get_children(universe.player)
            if relationship == WEARING
            and sentence.action.possible_now(universe, sentence, self, thing)
        ]


class ExitDirections(Domain):
    """Directions the player, or the vehicle they sit in, can leave by."""

    name = "exit_directions"
    indefinite = "some way"
    interrogative = "which way"

    def origin(self, universe: "Universe") -> tuple[Noun, Relationship]:
        return universe.get_parent_relationship(universe.mover())

    def find(self, universe: "Universe", sentence: Sentence, lit: bool = True) -> list[Answer]:
        origin, _ = self.origin(universe)
        return [
            Answer(text=str(direction), object=direction)
            for _, direction in universe.get_exits(origin)
            if sentence.action.possible_now(universe, sentence, self, direction)
        ]


class Immediate(Domain):
    """Things sitting right next to the mover, to get into or onto."""

    name = "immediate"

    def origin(self, universe: "Universe") -> tuple[Noun, Relationship]:
        return universe.get_parent_relationship(universe.mover())

    def find(self, universe: "Universe", sentence: Sentence, lit: bool = True) -> list[Answer]:
        if not lit:
            return []
        origin, origin_relationship = self.origin(universe)
        return [
            answer_for(thing)
            for thing, relationship in universe.get_children(origin)
            if relationship == origin_relationship
            and sentence.action.possible_now(universe, sentence, self, thing)
        ]


class Dialog(Domain):
    """Lines the player could say to the addressee chosen first.

    While the addressee is still ambiguous the lines are unknown, so the
    answer stays pending until the addressee is chosen.
    """

    name = "dialog"

    def find(self, universe: "Universe", sentence: Sentence, lit: bool = True) -> list[Answer]:
        addressee = sentence.arguments[0].object
        if not isinstance(addressee, Noun):
            return [Answer(text=self.indefinite)]
        return [
            Answer(text=f'"{text}"', object=text)
            for text in getattr(addressee, "dialog", {})
            if sentence.action.possible_now(universe, sentence, self, text)
        ]


REACHABLE = Reachable()
VISIBLE = Visible()
INVENTORY = Inventory()
OUTFIT = Outfit()
EXIT_DIRECTIONS = ExitDirections()
IMMEDIATE = Immediate()
DIALOG = Dialog()

DOMAINS: dict[str, Domain] = {
    domain.name: domain
    for domain in (REACHABLE, VISIBLE, INVENTORY, OUTFIT, EXIT_DIRECTIONS, IMMEDIATE, DIALOG)
}
