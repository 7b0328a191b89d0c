"""Action-token collection and the ``make:action`` flag processors.

An *action token* is the snake_case prefix that turns a bare name into an
action class name: ``store`` + ``Post`` gives ``StorePost``. Tokens are
accumulated in an :class:`ActionNameSet` by one processor per CLI flag,
always applied in the same order:

1. ``--resource`` -- adds the seven resource tokens.
2. ``--actions`` -- adds each listed token.
3. ``--except`` -- removes each listed token.
4. ``--api`` -- adds the five API tokens.

Order matters: ``--except`` can only remove what ``--resource`` and
``--actions`` added, and ``--api`` runs last, so it re-adds any API token
that ``--except`` removed. ``--api`` never removes ``create`` or ``edit``;
combine ``--resource --except=create,edit`` for that.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

import inflection

from actiongen.exceptions import InvalidActionNameError

RESOURCE_ACTIONS: tuple[str, ...] = (
    "index",
    "show",
    "create",
    "store",
    "edit",
    "update",
    "destroy",
)
"""The canonical resource set, in generation order."""

API_ACTIONS: tuple[str, ...] = ("index", "show", "store", "update", "destroy")
"""The resource set without the HTML-form actions ``create`` and ``edit``."""

_WORD_RE = re.compile(r"\w+", re.ASCII)


def is_word(value: str) -> bool:
    """Return ``True`` if *value* is one or more ASCII word characters."""
    return _WORD_RE.fullmatch(value) is not None


def normalize_action_name(action: str) -> str:
    """Validate *action* and convert it to its snake_case token form.

    >>> normalize_action_name("approveAll")
    'approve_all'

    Raises:
        InvalidActionNameError: If *action* contains non-word characters.
    """
    if not is_word(action):
        raise InvalidActionNameError(f"[{action}] is not a valid action name.")
    return inflection.underscore(action)


class ActionNameSet:
    """Ordered, duplicate-free collection of action tokens.

    An empty set is meaningful: it asks for exactly one class named after
    the bare ``NAME`` argument.
    """

    def __init__(self) -> None:
        self._actions: list[str] = []

    def add_if_not_exists(self, action: str) -> None:
        """Append the normalized *action* unless it is already present."""
        token = normalize_action_name(action)
        if token not in self._actions:
            self._actions.append(token)

    def delete_if_exists(self, action: str) -> None:
        """Remove the normalized *action* if present."""
        token = normalize_action_name(action)
        if token in self._actions:
            self._actions.remove(token)

    def is_empty(self) -> bool:
        return not self._actions

    def get(self) -> tuple[str, ...]:
        """Return the tokens in insertion order."""
        return tuple(self._actions)

    def __contains__(self, action: object) -> bool:
        return action in self._actions

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._actions))

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        return f"ActionNameSet({list(self._actions)!r})"


# ---------------------------------------------------------------------------
# Option processors
# ---------------------------------------------------------------------------


def _split_csv(value: Optional[str]) -> list[str]:
    """Split a comma-separated flag value, validating every token up front."""
    if not value:
        return []
    return [normalize_action_name(action) for action in value.split(",")]


def process_resource_option(names: ActionNameSet, resource: bool) -> ActionNameSet:
    """Apply ``--resource``: add every resource token."""
    if resource:
        for action in RESOURCE_ACTIONS:
            names.add_if_not_exists(action)
    return names


def process_actions_option(names: ActionNameSet, actions: Optional[str]) -> ActionNameSet:
    """Apply ``--actions=a,b,c``: add each token in listed order.

    Raises:
        InvalidActionNameError: If any listed token is malformed. Nothing
            is added in that case.
    """
    for action in _split_csv(actions):
        names.add_if_not_exists(action)
    return names


def process_except_option(names: ActionNameSet, except_: Optional[str]) -> ActionNameSet:
    """Apply ``--except=a,b``: remove each listed token.

    Raises:
        InvalidActionNameError: If any listed token is malformed.
    """
    for action in _split_csv(except_):
        names.delete_if_exists(action)
    return names


def process_api_option(names: ActionNameSet, api: bool) -> ActionNameSet:
    """Apply ``--api``: add every API token."""
    if api:
        for action in API_ACTIONS:
            names.add_if_not_exists(action)
    return names


def collect_action_names(
    resource: bool = False,
    actions: Optional[str] = None,
    except_: Optional[str] = None,
    api: bool = False,
) -> ActionNameSet:
    """Build the :class:`ActionNameSet` for one ``make:action`` invocation.

    Runs the four processors in their fixed order on a fresh set.

    Example::

        >>> collect_action_names(resource=True, except_="index,show,edit").get()
        ('create', 'store', 'update', 'destroy')
    """
    names = ActionNameSet()
    process_resource_option(names, resource)
    process_actions_option(names, actions)
    process_except_option(names, except_)
    process_api_option(names, api)
    return names
