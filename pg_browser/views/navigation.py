"""Resolve a sequence of navigation tokens into a view."""

import logging
from typing import Iterable

from .view import View

logger = logging.getLogger(__name__)


def resolve(start: View, tokens: Iterable[str]) -> View:
    """Descend from start through each token in turn.

    An empty token sequence returns start unchanged. The first token that
    cannot be resolved aborts resolution; later tokens are not consulted.

    Args:
        start: View to start from, normally a RootView
        tokens: Path-like tokens, e.g. ("base", "16384")

    Returns:
        The view reached after the last token

    Raises:
        NavigationError: From the first failing View.next() call

    Example:
        >>> view = resolve(RootView(Path("/var/lib/postgresql/data")), ["base", "5"])
        >>> view.path
        PosixPath('/var/lib/postgresql/data/base/5')
    """
    view = start
    for token in tokens:
        logger.debug(f"Navigating from {view.path} into {token!r}")
        view = view.next(token)
    return view
