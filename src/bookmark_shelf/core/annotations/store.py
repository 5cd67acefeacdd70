"""Per-URL comment threads."""

from datetime import datetime

from loguru import logger

from bookmark_shelf.config import NAMETAG_SEPARATOR, resolve_current_user
from bookmark_shelf.ids import new_id, utc_now
from bookmark_shelf.models.node import Comment, CurrentUser
from bookmark_shelf.protocols import ClockProtocol, IdFactoryProtocol


class AnnotationStore:
    """Ordered comments keyed by URL.

    Keys are matched by exact string identity; no normalization, ownership or
    content checks happen here.
    """

    def __init__(
        self,
        *,
        current_user: CurrentUser | None = None,
        id_factory: IdFactoryProtocol = new_id,
        clock: ClockProtocol = utc_now,
    ) -> None:
        self._new_id = id_factory
        self._now = clock
        self._comments: dict[str, list[Comment]] = {}
        self.current_user = current_user or resolve_current_user()

    @property
    def current_user_nametag(self) -> str:
        return f"{self.current_user.nickname}{NAMETAG_SEPARATOR}{self.current_user.epithet}"

    @property
    def urls(self) -> list[str]:
        """URLs that currently have at least one comment."""
        return [url for url, comments in self._comments.items() if comments]

    def get_comments(self, url: str) -> tuple[Comment, ...]:
        return tuple(self._comments.get(url, ()))

    def add_comment(self, url: str, content: str) -> Comment:
        """Append a comment by the current user to the URL's thread."""
        comment = Comment(
            id=self._new_id(),
            nametag=self.current_user_nametag,
            content=content,
            created_at=self._now(),
        )
        self._comments.setdefault(url, []).append(comment)
        logger.debug("Added comment {} on {}", comment.id, url)
        return comment

    def update_comment(self, url: str, comment_id: str, content: str) -> Comment | None:
        """Replace a comment's content.

        Returns:
            The edited comment, or None if the URL or comment is unknown.
        """
        comment = next((c for c in self._comments.get(url, ()) if c.id == comment_id), None)
        if comment is None:
            return None
        comment.content = content
        comment.updated_at = self._now()
        logger.debug("Updated comment {} on {}", comment_id, url)
        return comment

    def remove_comment(self, url: str, comment_id: str) -> bool:
        comments = self._comments.get(url)
        if not comments:
            return False
        for index, comment in enumerate(comments):
            if comment.id == comment_id:
                del comments[index]
                if not comments:
                    del self._comments[url]
                logger.debug("Removed comment {} from {}", comment_id, url)
                return True
        return False

    def import_comment(
        self, url: str, *, nametag: str, content: str, created_at: datetime
    ) -> Comment:
        """Append a comment written by someone else, keeping its author and time."""
        comment = Comment(
            id=self._new_id(), nametag=nametag, content=content, created_at=created_at
        )
        self._comments.setdefault(url, []).append(comment)
        logger.debug("Imported comment {} on {}", comment.id, url)
        return comment

    def reset(self) -> None:
        self._comments.clear()
