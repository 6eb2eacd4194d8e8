"""
Answer models - the disambiguation tree behind every menu.

A Sentence is an action plus one Answer per argument domain. An Answer
is either concrete (its object is a noun, a direction or a line of
dialog), ambiguous (its object is a Question over more Answers), or
pending (its object is None: the candidates depend on an earlier
argument that has not been chosen yet).

Example:
    >>> question = Question(
    ...     text="what",
    ...     answers=[Answer(text="the hat", object=hat), Answer(text="the apple", object=apple)],
    ... )
    >>> sentence = Sentence(action=take, arguments=[Answer(text="something", object=question)])
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from menu_adventures.models.grammar import Direction
from menu_adventures.models.nouns import Noun


class Question(BaseModel):
    """A prompt plus the candidate answers the player picks from."""

    text: str
    answers: list["Answer"] = Field(default_factory=list)

    def leaves(self) -> list["Answer"]:
        """All concrete answers below this question, in menu order."""
        found = []
        for answer in self.answers:
            if isinstance(answer.object, Question):
                found.extend(answer.object.leaves())
            else:
                found.append(answer)
        return found


class Answer(BaseModel):
    """A resolved, ambiguous or pending sentence argument.

    Attributes:
        text: How the argument reads inside a sentence
        object: Noun, Direction, dialog key, nested Question, or None
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    text: str
    object: Noun | Direction | Question | str | None = None

    @property
    def is_ambiguous(self) -> bool:
        return isinstance(self.object, Question)

    @property
    def is_pending(self) -> bool:
        return self.object is None


class Sentence(BaseModel):
    """An action plus its (possibly still ambiguous) arguments."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    action: Any
    arguments: list[Answer] = Field(default_factory=list)

    def objects(self) -> list[Any]:
        """The concrete argument objects, in declared domain order."""
        return [answer.object for answer in self.arguments]

    def replace_argument(self, index: int, text: str) -> "Sentence":
        """A copy of the sentence with one argument blanked out to `text`."""
        arguments = list(self.arguments)
        arguments[index] = Answer(text=text)
        return Sentence(action=self.action, arguments=arguments)


Question.model_rebuild()
