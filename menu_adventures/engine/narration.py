"""
Narration - turning nouns, relationships and subtrees into English.

Nouns render differently depending on what the reader already knows:

- known: "the yellow box" (default; used inside sentences)
- unknown: "a yellow box" (used when listing surroundings)
- proper nouns (empty article) always render bare: "Matilda"
- first and second person nouns render as pronouns: "you", "yourself"

Listings are nested blocks: a noun followed by ":" when it has visible
children, then one line per relationship verb (or direction, for doors),
then the children two spaces further in, recursively.

Example:
    >>> print_environment(universe)
    A non-descript room

    A:
      contains:
        you
        a car
      west:
        a yellow door (locked)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menu_adventures.models.grammar import BE, Direction, Relationship, Verb
from menu_adventures.models.nouns import Door, GrammaticalPerson, Noun

if TYPE_CHECKING:
    from menu_adventures.engine.domains import Domain
    from menu_adventures.engine.universe import Universe


def subject_to_verb(subject: Noun, verb: Verb) -> str:
    """The form of `verb` agreeing with `subject`."""
    if subject.grammatical_person == GrammaticalPerson.THIRD and not subject.plural:
        return verb.third_person_singular_present
    return verb.base


def pronoun_for(thing: Noun, is_object: bool = False) -> str:
    """The pronoun standing in for a noun.

    The object form of the second person is reflexive ("yourself"),
    since the player is always the implied subject of a sentence.
    """
    person = thing.grammatical_person
    if person == GrammaticalPerson.FIRST:
        if thing.plural:
            return "us" if is_object else "we"
        return "me" if is_object else "I"
    if person == GrammaticalPerson.SECOND:
        return "yourself" if is_object else "you"
    if thing.plural:
        return "them" if is_object else "they"
    return "it"


def render_noun(thing: Noun, known: bool = True, is_object: bool = False) -> str:
    """How a noun reads in running text."""
    if thing.grammatical_person != GrammaticalPerson.THIRD:
        return pronoun_for(thing, is_object=is_object)
    if not thing.indefinite_article:
        return thing.name
    if known:
        return f"the {thing.name}"
    return f"{thing.indefinite_article} {thing.name}"


def capitalize(text: str) -> str:
    """Upper-case the first character only."""
    return text[:1].upper() + text[1:]


def string_relationship_to(thing_text: str, relationship: Relationship, parent: Noun) -> str:
    """Describe a child relative to its parent: "the key in the box"."""
    return relationship.phrase.format(
        thing=thing_text,
        parent=render_noun(parent),
        be=subject_to_verb(parent, BE),
        name=relationship.name,
    )


def relationship_as_verb(parent: Noun, label: Relationship | Direction) -> str:
    """Heading for a group of children: "contains", "carry", "west"."""
    if isinstance(label, Direction):
        return str(label)
    return subject_to_verb(parent, label.verb)


def mention_status(thing: Noun) -> str:
    """Capability state worth showing next to a noun in listings."""
    status = ""
    if thing.is_lockable_and_locked():
        status += " (locked)"
    elif thing.is_closable_and_closed():
        status += " (closed)"
    if thing.switchable is not None:
        status += " (on)" if thing.switchable.on else " (off)"
    return status


Relations = dict[Relationship | Direction, list[Noun]]


def visible_children(universe: "Universe", domain: "Domain", thing: Noun) -> Relations:
    """Children of a noun the domain does not block, grouped by relationship."""
    relations: Relations = {}
    for child, relationship in universe.get_children(thing):
        if not domain.blocking(thing, relationship, child):
            relations.setdefault(relationship, []).append(child)
    return relations


def print_relations(
    universe: "Universe",
    indent: int,
    domain: "Domain",
    parent: Noun,
    relations: Relations,
) -> None:
    """Print grouped children of `parent`, recursing into theirs.

    The player is listed but never expanded; the inventory has its own
    action.
    """
    interface = universe.interface
    relationship_indent = indent + 2
    sub_indent = relationship_indent + 2
    for label, things in relations.items():
        interface.write_line(" " * relationship_indent + relationship_as_verb(parent, label) + ":")
        for thing in things:
            sub_relations: Relations = {}
            if thing is not universe.player:
                sub_relations = visible_children(universe, domain, thing)
            line = " " * sub_indent + render_noun(thing, known=False) + mention_status(thing)
            if sub_relations:
                line += ":"
            interface.write_line(line)
            print_relations(universe, sub_indent, domain, thing, sub_relations)


def print_environment(universe: "Universe", domain: "Domain | None" = None) -> None:
    """Describe where the player is and everything visible from there."""
    from menu_adventures.engine.domains import VISIBLE

    domain = domain or VISIBLE
    interface = universe.interface
    origin, origin_relationship = domain.origin(universe)

    description = origin.get_description(universe)
    if description:
        interface.write_wrapped(description)
        interface.write_line()

    relations: Relations = {}
    for thing, relationship in universe.get_children(origin):
        if relationship == origin_relationship:
            relations.setdefault(relationship, []).append(thing)
    for location, direction in universe.get_exits(origin):
        if isinstance(location, Door):
            relations.setdefault(direction, []).append(location)

    line = render_noun(origin, known=False)
    if relations:
        line += ":"
    interface.write_line(line)
    print_relations(universe, 0, domain, origin, relations)