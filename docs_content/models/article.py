"""Article model: leaf content page."""

from enum import Enum

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, str_list_from_json, str_list_to_json


class ArticleStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    UNLISTED = "unlisted"


class Article(Base):
    """Article row with its position inside section, category and group."""

    __tablename__ = "articles"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    path: Mapped[str] = mapped_column(String(1024), unique=True, nullable=False, index=True)
    section_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    section_index: Mapped[int] = mapped_column(Integer, nullable=False)
    category_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category_index: Mapped[int] = mapped_column(Integer, nullable=False)
    group_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    group_index: Mapped[int | None] = mapped_column(Integer, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=ArticleStatus.PUBLISHED.value, index=True
    )
    author_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hero: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    keywords_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    source_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Article {self.id} section={self.section_id} "
            f"section_index={self.section_index} status={self.status}>"
        )

    def get_keywords(self) -> list[str]:
        return str_list_from_json(self.keywords_json)

    def set_keywords(self, keywords: list[str]) -> None:
        self.keywords_json = str_list_to_json(keywords)

    @property
    def is_published(self) -> bool:
        return self.status == ArticleStatus.PUBLISHED.value

    @property
    def is_draft(self) -> bool:
        return self.status == ArticleStatus.DRAFT.value

    @property
    def is_unlisted(self) -> bool:
        return self.status == ArticleStatus.UNLISTED.value
