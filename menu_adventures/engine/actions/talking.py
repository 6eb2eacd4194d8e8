"""
Talking - saying a line of dialog to someone visible.

Anyone who can be talked to carries a `dialog` mapping from what the
player may say to a DialogLine. Saying a line prints the reply, runs
the line's trigger (if any) with the universe and the addressee, and
removes the line so it is not offered again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menu_adventures.engine.actions.base import Action
from menu_adventures.engine.domains import DIALOG, VISIBLE, Dialog, Visible
from menu_adventures.engine.narration import capitalize, render_noun, subject_to_verb
from menu_adventures.engine.possibility import declare, ever_possible
from menu_adventures.models.grammar import REPLY

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe
    from menu_adventures.models.nouns import Noun


class Say(Action):
    """Say a line to someone visible; the addressee comes first."""

    name = "say"
    argument_domains = (VISIBLE, DIALOG)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if not ever_possible(self, domain, thing):
            return False
        if isinstance(domain, Visible):
            return bool(getattr(thing, "dialog", None))
        return True

    def print_sentence(self, person_text: str, text_text: str) -> str:
        return f"Say {text_text} to {person_text}"

    def __call__(self, universe: "Universe", person: "Noun", text: str) -> bool:
        line = person.dialog.pop(text)
        universe.interface.write_wrapped(
            f'{capitalize(render_noun(person))} {subject_to_verb(person, REPLY)} "{line.reply}"'
        )
        if line.trigger is not None:
            line.trigger(universe, person)
        return False


declare(Say, Dialog, str)
