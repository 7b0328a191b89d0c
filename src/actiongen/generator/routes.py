"""Suggested Laravel route registrations for generated actions.

After ``make:action`` writes its classes, the command prints one
``Route::`` line per class so the user can paste them into
``routes/web.php``. Each class name is reduced back to its action token,
which selects an HTTP verb and a URL template from two fixed tables.
Tokens outside the resource set fall back to ``GET {plural}/{token}``.

Example output for ``actiongen make:action Post --actions=store,approve``::

    Route::post('posts', '\\App\\Http\\Actions\\StorePost')->name('posts.store');
    Route::get('posts/approve', '\\App\\Http\\Actions\\ApprovePost')->name('posts.approve');
"""

from __future__ import annotations

import inflection

from actiongen.generator.names import qualify, studly
from actiongen.models import RouteSuggestion

ACTION_VERBS: dict[str, str] = {
    "index": "GET",
    "show": "GET",
    "create": "GET",
    "store": "POST",
    "edit": "GET",
    "update": "PUT",
    "destroy": "DELETE",
}

ACTION_PATHS: dict[str, str] = {
    "index": "{plural}",
    "show": "{plural}/{{{singular}}}",
    "create": "{plural}/create",
    "store": "{plural}",
    "edit": "{plural}/{{{singular}}}/edit",
    "update": "{plural}/{{{singular}}}",
    "destroy": "{plural}/{{{singular}}}",
}

DEFAULT_VERB = "GET"
DEFAULT_PATH = "{plural}/{token}"


def route_token(class_name: str, name: str) -> str:
    """Recover the lowercase action token from a generated class name.

    >>> route_token("StorePost", "post")
    'store'
    >>> route_token("Post", "post")
    ''
    """
    base = studly(name)
    if class_name.endswith(base):
        class_name = class_name[: -len(base)]
    return class_name.lower()


def build_route_suggestion(class_name: str, name: str, namespace: str) -> RouteSuggestion:
    """Build the :class:`RouteSuggestion` for one generated class.

    Args:
        class_name: Generated short class name, e.g. ``StorePost``.
        name: The validated ``NAME`` argument the class was derived from.
        namespace: Final namespace the class was generated into.
    """
    plural = inflection.pluralize(name).lower()
    singular = inflection.singularize(name).lower()
    token = route_token(class_name, name)

    verb = ACTION_VERBS.get(token, DEFAULT_VERB)
    template = ACTION_PATHS.get(token, DEFAULT_PATH)
    path = template.format(plural=plural, singular=singular, token=token)

    return RouteSuggestion(
        http_verb=verb,
        route_path=path.rstrip("/"),
        target_class=qualify(namespace, class_name),
        route_name=f"{plural}.{token}" if token else plural,
    )


def build_route_suggestions(
    class_names: list[str], name: str, namespace: str
) -> list[RouteSuggestion]:
    """Build suggestions for every class, preserving order."""
    return [build_route_suggestion(c, name, namespace) for c in class_names]


def format_route(suggestion: RouteSuggestion) -> str:
    """Render *suggestion* as a Laravel route declaration line."""
    return (
        f"Route::{suggestion.http_verb.lower()}('{suggestion.route_path}', "
        f"'\\{suggestion.target_class}')->name('{suggestion.route_name}');"
    )


def format_routes(suggestions: list[RouteSuggestion]) -> str:
    """Render all suggestions, one declaration per line."""
    return "\n".join(format_route(s) for s in suggestions)
