"""Configuration constants for bookmark-shelf."""

import os
from collections.abc import Mapping

from bookmark_shelf.models.node import CurrentUser

# Joins the author's nickname and epithet into a comment nametag.
NAMETAG_SEPARATOR: str = " • "

DEFAULT_NICKNAME: str = "User"
DEFAULT_EPITHET: str = "Developer"

NICKNAME_ENV_VAR: str = "BOOKMARK_SHELF_NICKNAME"
EPITHET_ENV_VAR: str = "BOOKMARK_SHELF_EPITHET"


def resolve_current_user(environ: Mapping[str, str] | None = None) -> CurrentUser:
    """Build the comment author from the environment, falling back to defaults."""
    env = os.environ if environ is None else environ
    return CurrentUser(
        nickname=env.get(NICKNAME_ENV_VAR) or DEFAULT_NICKNAME,
        epithet=env.get(EPITHET_ENV_VAR) or DEFAULT_EPITHET,
    )
