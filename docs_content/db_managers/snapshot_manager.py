"""Manager for publishing content snapshots: replaces every content row."""

from sqlalchemy.orm import Session

from ..models import Article, Author, Category, Group, Section


class SnapshotManager:
    """Writes snapshot rows. Takes a DB session as input; used at build time only."""

    def __init__(self, session: Session):
        self._session = session

    def clear_all(self) -> dict[str, int]:
        """Delete every content row. Returns deleted counts per table."""
        counts: dict[str, int] = {}
        for model in (Article, Group, Category, Section, Author):
            counts[model.__tablename__] = self._session.query(model).delete()
        return counts

    def add_all(
        self,
        *,
        sections: list[Section],
        categories: list[Category],
        groups: list[Group],
        articles: list[Article],
        authors: list[Author],
    ) -> None:
        self._session.add_all(authors)
        self._session.add_all(sections)
        self._session.add_all(categories)
        self._session.add_all(groups)
        self._session.add_all(articles)
        self._session.flush()

