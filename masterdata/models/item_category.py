"""Item category model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from masterdata.models.base import DEFAULT_REC_SEQ, Base, RecordMixin, new_record_id


class ItemCategory(RecordMixin, Base):
    """A category of items within one list.

    Category names are unique per list among active records.
    """

    __tablename__ = "ItemCategories"

    item_category_id: Mapped[str] = mapped_column(
        "itemCategoryId", String(36), primary_key=True, default=new_record_id
    )
    list_id: Mapped[str] = mapped_column("listId", String(36), nullable=False, index=True)
    list_rec_seq: Mapped[int] = mapped_column(
        "listRecSeq", Integer, nullable=False, default=DEFAULT_REC_SEQ
    )
    name: Mapped[str] = mapped_column("name", String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<ItemCategory {self.name} list={self.list_id}>"
