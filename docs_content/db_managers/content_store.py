"""Read-only access to the published content tables using a DB session."""

from typing import Union

from sqlalchemy.orm import Session

from ..models import Article, Author, Category, ContentKind, Group, Section

ContentEntity = Union[Section, Category, Group, Article]

_MODELS: dict[ContentKind, type[ContentEntity]] = {
    ContentKind.SECTION: Section,
    ContentKind.CATEGORY: Category,
    ContentKind.GROUP: Group,
    ContentKind.ARTICLE: Article,
}


def _model_for(kind: ContentKind) -> type[ContentEntity]:
    try:
        return _MODELS[ContentKind(kind)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown content table: {kind!r}") from None


class ContentStore:
    """Query-by-key / query-all interface over the content tables.

    Takes a DB session as input; never writes. Listings come back in the
    hierarchy's natural order (index ascending within each parent).
    """

    def __init__(self, session: Session):
        self._session = session

    def get_by_path(self, kind: ContentKind, path: str) -> ContentEntity | None:
        model = _model_for(kind)
        return self._session.query(model).filter(model.path == path).first()

    def get_by_id(self, kind: ContentKind, entity_id: str) -> ContentEntity | None:
        model = _model_for(kind)
        return self._session.get(model, entity_id)

    def get_all(self, kind: ContentKind) -> list[ContentEntity]:
        model = _model_for(kind)
        kind = ContentKind(kind)
        if kind is ContentKind.SECTION:
            return self.list_sections()
        query = self._session.query(model)
        if kind is ContentKind.CATEGORY:
            query = query.join(Section, Section.id == Category.section_id).order_by(
                Section.index, Category.index
            )
        elif kind is ContentKind.GROUP:
            query = (
                query.join(Category, Category.id == Group.category_id)
                .join(Section, Section.id == Group.section_id)
                .order_by(Section.index, Category.index, Group.index)
            )
        else:
            query = query.join(Section, Section.id == Article.section_id).order_by(
                Section.index, Article.section_index
            )
        return query.all()

    def list_sections(self) -> list[Section]:
        return self._session.query(Section).order_by(Section.index).all()

    def list_categories(self, section_id: str) -> list[Category]:
        return (
            self._session.query(Category)
            .filter(Category.section_id == section_id)
            .order_by(Category.index)
            .all()
        )

    def list_groups(self, category_id: str) -> list[Group]:
        return (
            self._session.query(Group)
            .filter(Group.category_id == category_id)
            .order_by(Group.index)
            .all()
        )

    def list_section_articles(self, section_id: str) -> list[Article]:
        return (
            self._session.query(Article)
            .filter(Article.section_id == section_id)
            .order_by(Article.section_index)
            .all()
        )

    def list_category_articles(self, category_id: str) -> list[Article]:
        return (
            self._session.query(Article)
            .filter(Article.category_id == category_id)
            .order_by(Article.category_index)
            .all()
        )

    def get_author(self, author_id: str) -> Author | None:
        return self._session.get(Author, author_id)

    def list_authors(self) -> list[Author]:
        return self._session.query(Author).order_by(Author.id).all()
