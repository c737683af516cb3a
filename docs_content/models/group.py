"""Group model: organizational label for articles inside a category.

Groups never own a page. The path column exists only because generated content
may carry one; it is checked for uniqueness but never resolved.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Group(Base):
    __tablename__ = "article_groups"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    section_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    index: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    path: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    def __repr__(self) -> str:
        return f"<Group {self.id} category={self.category_id} index={self.index}>"

    @property
    def label(self) -> str:
        return self.title or self.id
