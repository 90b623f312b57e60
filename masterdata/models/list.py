"""List model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from masterdata.models.base import Base, RecordMixin, new_record_id


class List(RecordMixin, Base):
    """A named list (e.g. "Groceries", "Books") that items are grouped under."""

    __tablename__ = "Lists"

    list_id: Mapped[str] = mapped_column("listId", String(36), primary_key=True, default=new_record_id)
    name: Mapped[str] = mapped_column("name", String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<List {self.name}>"
