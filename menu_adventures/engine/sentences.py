"""
Sentence enumeration and disambiguation.

Every turn each registered action gets one chance to become a menu row.
Its argument domains are searched left to right; a domain with no
candidates makes the action a dead end for this turn. One candidate is
bound directly, several are bound as a Question to be narrowed down
after the player picks the row.

When an earlier argument is ambiguous, candidates for it that would
leave a later argument with nothing to choose from are pruned, and once
the player has resolved an earlier argument every later one is searched
again against it. This is what keeps "Put the box into the box" off the
menu even when the box was one of several things being carried.

Example:
    >>> sentences = enumerate_sentences(universe, lit=True)
    >>> [render_sentence(sentence) for sentence in sentences]
    ['Drop the hat', 'Go some way', 'Take something', 'Quit']
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from menu_adventures.engine.errors import MalformedQuestion
from menu_adventures.models.answers import Answer, Question, Sentence

if TYPE_CHECKING:
    from menu_adventures.engine.actions.base import Action
    from menu_adventures.engine.universe import Universe

logger = logging.getLogger(__name__)


def render_sentence(sentence: Sentence, suffix: str = "") -> str:
    """The sentence as a menu row, or as a prompt with a suffix like "?"."""
    texts = [answer.text for answer in sentence.arguments]
    return sentence.action.print_sentence(*texts) + suffix


def _bind_remaining(
    universe: "Universe", sentence: Sentence, lit: bool
) -> Sentence | None:
    """Search the domains not bound yet; None when one comes up empty."""
    action = sentence.action
    for domain in action.argument_domains[len(sentence.arguments):]:
        answers = domain.find(universe, sentence, lit=lit)
        if not answers:
            return None
        sentence.arguments.append(domain.group(answers))
    return sentence


def _completes(
    universe: "Universe", sentence: Sentence, index: int, answer: Answer, lit: bool
) -> bool:
    """Whether fixing argument `index` to `answer` leaves every later domain non-empty."""
    trial = Sentence(
        action=sentence.action,
        arguments=[*sentence.arguments[:index], answer],
    )
    return _bind_remaining(universe, trial, lit) is not None


def _prune(answer: Answer, keep: Callable[[Answer], bool]) -> Answer | None:
    """Drop concrete answers `keep` rejects; collapse questions left with one."""
    if not isinstance(answer.object, Question):
        return answer if keep(answer) else None
    question = answer.object
    kept = [
        pruned
        for pruned in (_prune(sub_answer, keep) for sub_answer in question.answers)
        if pruned is not None
    ]
    if not kept:
        return None
    if len(kept) == 1:
        return kept[0]
    return Answer(text=answer.text, object=Question(text=question.text, answers=kept))


def build_sentence(universe: "Universe", action: "Action", lit: bool = True) -> Sentence | None:
    """Bind every argument of `action`, or None if it is a dead end now."""
    sentence = _bind_remaining(universe, Sentence(action=action), lit)
    if sentence is None:
        return None

    arguments = sentence.arguments
    for index in range(len(arguments) - 1):
        if not arguments[index].is_ambiguous:
            continue
        pruned = _prune(
            arguments[index],
            lambda answer: _completes(universe, sentence, index, answer, lit),
        )
        if pruned is None:
            logger.debug(f"{action!r} pruned to a dead end")
            return None
        arguments[index] = pruned

    if not action.is_possible(universe):
        return None
    return sentence


def enumerate_sentences(universe: "Universe", lit: bool = True) -> list[Sentence]:
    """Every sentence the player could start this turn, in action order."""
    sentences = []
    for action in universe.actions:
        sentence = build_sentence(universe, action, lit)
        if sentence is not None:
            sentences.append(sentence)
    logger.debug(f"{len(sentences)} sentences offered")
    return sentences


def choose(universe: "Universe", sentence: Sentence, index: int, answer: Answer) -> Answer:
    """Narrow an argument down to a concrete answer through nested menus.

    Each menu shows the sentence with the argument replaced by the
    question ("Take what in the yellow box?") and one option per
    candidate. Every choice is appended to the universe's choice log.

    Raises:
        MalformedQuestion: If a question without answers reaches the menu
    """
    interface = universe.interface
    while isinstance(answer.object, Question):
        question = answer.object
        if not question.answers:
            raise MalformedQuestion(
                f"{render_sentence(sentence)}: question {question.text!r} has no answers"
            )
        interface.write_line()
        prompt = render_sentence(sentence.replace_argument(index, question.text), "?")
        options = [
            render_sentence(sentence.replace_argument(index, sub_answer.text))
            for sub_answer in question.answers
        ]
        choice = interface.present_menu(prompt, options)
        universe.log_choice(choice)
        answer = question.answers[choice - 1]
    return answer


def resolve_arguments(universe: "Universe", sentence: Sentence, lit: bool = True) -> list[Any]:
    """Disambiguate every argument in order and return the concrete objects.

    Arguments after the first are searched again once the earlier ones
    are fixed, so their candidates can depend on the earlier choices.

    Raises:
        MalformedQuestion: If a later argument has no candidates left
    """
    arguments = sentence.arguments
    domains = sentence.action.argument_domains
    for index in range(len(arguments)):
        if index > 0:
            prefix = Sentence(action=sentence.action, arguments=arguments[:index])
            answers = domains[index].find(universe, prefix, lit=lit)
            if not answers:
                raise MalformedQuestion(
                    f"{render_sentence(sentence)}: no candidates left for argument {index + 1}"
                )
            arguments[index] = domains[index].group(answers)
        arguments[index] = choose(universe, sentence, index, arguments[index])
    return sentence.objects()
