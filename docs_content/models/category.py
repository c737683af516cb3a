"""Category model: mid-level grouping owned by one section."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, str_list_from_json, str_list_to_json


class Category(Base):
    """Category row tied to a section."""

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    path: Mapped[str] = mapped_column(String(1024), unique=True, nullable=False, index=True)
    section_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    index: Mapped[int] = mapped_column(Integer, nullable=False)
    group_ids_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    def __repr__(self) -> str:
        return f"<Category {self.id} section={self.section_id} index={self.index} path={self.path!r}>"

    def get_group_ids(self) -> list[str]:
        return str_list_from_json(self.group_ids_json)

    def set_group_ids(self, group_ids: list[str]) -> None:
        self.group_ids_json = str_list_to_json(group_ids)
