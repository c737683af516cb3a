"""Section model: top level of the content hierarchy."""

from enum import Enum

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, str_list_from_json, str_list_to_json


class SidebarBehavior(str, Enum):
    SHOW_LINKS = "show-links"
    SHOW_TITLE = "show-title"


class Section(Base):
    """Top-level grouping of documentation content."""

    __tablename__ = "sections"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    path: Mapped[str] = mapped_column(String(1024), unique=True, nullable=False, index=True)
    index: Mapped[int] = mapped_column(Integer, nullable=False)
    sidebar_behavior: Mapped[str] = mapped_column(
        String(32), nullable=False, default=SidebarBehavior.SHOW_LINKS.value
    )
    category_ids_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    def __repr__(self) -> str:
        return f"<Section {self.id} index={self.index} path={self.path!r}>"

    def get_category_ids(self) -> list[str]:
        return str_list_from_json(self.category_ids_json)

    def set_category_ids(self, category_ids: list[str]) -> None:
        self.category_ids_json = str_list_to_json(category_ids)

    @property
    def shows_links(self) -> bool:
        return self.sidebar_behavior == SidebarBehavior.SHOW_LINKS.value
