#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Interactive category navigator.

The navigator walks the category tree one level at a time. At every step the
operator may descend into an existing child, add a new label below the current
position, go back one level, or, once there is nothing left to descend into,
finish. Navigation state is an immutable value: every transition returns a new
``NavigationState`` so a session can be undone, replayed or restarted from any
path.
"""

from __future__ import annotations

from enum import Enum

from attrs import define, evolve, field
from provide.foundation import logger

from flagforge.categories.tree import CategoryTree, children_at, join_path
from flagforge.config.defaults import CATEGORY_SEPARATOR
from flagforge.exceptions import InvalidCategoryChoiceError
from flagforge.models import PathItem
from flagforge.prompts import Prompter, ask_text


class CategoryAnswer(str, Enum):
    """Control answers offered next to the category labels."""

    GO_BACK = " - (go one level back)"
    ADD_NEW = " + (add new entry)"
    SAVE_NOW = " * (finish entering category)"


CONTROL_ANSWERS = frozenset(answer.value for answer in CategoryAnswer)


@define(frozen=True)
class NavigationState:
    """Current path plus the labels reserved across the whole taxonomy."""

    path: tuple[PathItem, ...] = ()
    reserved: frozenset[str] = field(factory=frozenset, converter=frozenset)

    @property
    def level(self) -> int:
        return len(self.path) + 1

    @property
    def category(self) -> str:
        return join_path(self.path)


def available_choices(tree: CategoryTree, state: NavigationState) -> list[str]:
    """Choices offered for ``state``, in display order."""
    children = children_at(tree, state.path)
    choices = list(children) if children else [CategoryAnswer.SAVE_NOW.value]
    if state.path:
        choices.append(CategoryAnswer.GO_BACK.value)
    choices.append(CategoryAnswer.ADD_NEW.value)
    return choices


def descend(tree: CategoryTree, state: NavigationState, label: str) -> NavigationState:
    """Step into an existing child of the current node."""
    if label not in children_at(tree, state.path):
        raise InvalidCategoryChoiceError(f"'{label}' is not a subcategory of '{state.category or '<root>'}'")
    return evolve(state, path=(*state.path, PathItem(label, is_custom=False)))


def new_item_error(state: NavigationState, label: str) -> str | None:
    """Why ``label`` cannot be added as a new category item, or None."""
    if not label:
        return "Category item must not be empty!"
    if CATEGORY_SEPARATOR in label:
        return f"Category item must not contain '{CATEGORY_SEPARATOR}'!"
    if label in CONTROL_ANSWERS:
        return "Category item must not be a navigation choice!"
    if label in state.reserved:
        return "Category item must be unique!"
    return None


def add_item(state: NavigationState, label: str) -> NavigationState:
    """Append a new custom label and reserve it."""
    error = new_item_error(state, label)
    if error:
        raise InvalidCategoryChoiceError(error)
    return NavigationState(
        path=(*state.path, PathItem(label, is_custom=True)),
        reserved=state.reserved | {label},
    )


def go_back(state: NavigationState) -> NavigationState:
    """Drop the last path item, releasing its reservation if it was custom."""
    if not state.path:
        raise InvalidCategoryChoiceError("Already at the top-level category")
    last = state.path[-1]
    reserved = state.reserved - {last.name} if last.is_custom else state.reserved
    return NavigationState(path=state.path[:-1], reserved=reserved)


def prompt_message(state: NavigationState) -> str:
    if not state.path:
        return "Select top-level category"
    trail = " => ".join(item.name for item in state.path)
    return f"Select subcategory\nYour choices: {trail} => "


class CategoryNavigator:
    """Drives a navigation session through a prompter."""

    def __init__(self, tree: CategoryTree, prompter: Prompter) -> None:
        self.tree = tree
        self.prompter = prompter

    def run(self, initial: NavigationState | None = None) -> tuple[str, NavigationState]:
        """Navigate until the operator finishes; return the category and final state."""
        state = initial or NavigationState()
        while True:
            choices = available_choices(self.tree, state)
            answer = self.prompter.select(prompt_message(state), choices)
            logger.debug("Category answer", depth=state.level, answer=answer)

            if answer == CategoryAnswer.SAVE_NOW.value:
                return state.category, state
            if answer == CategoryAnswer.GO_BACK.value:
                state = go_back(state)
            elif answer == CategoryAnswer.ADD_NEW.value:
                current = state
                label = ask_text(
                    self.prompter,
                    "Enter new category item",
                    validate=lambda value: new_item_error(current, value),
                )
                state = add_item(state, label)
            else:
                state = descend(self.tree, state, answer)


# 🚩🧩🔚
