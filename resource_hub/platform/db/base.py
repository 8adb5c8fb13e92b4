import sqlalchemy
from sqlalchemy import Column, String
from sqlalchemy.orm import declarative_base
from uuid6 import uuid7

Base = declarative_base()


class BaseModel(Base):
    """
    Common columns for every table: a time-ordered uuid7 string id plus
    created/updated timestamps filled in by the database.
    """

    __abstract__ = True

    id = Column(String, primary_key=True, default=lambda: str(uuid7()), index=True)
    created_at = Column(
        sqlalchemy.DateTime(timezone=True), server_default=sqlalchemy.func.now(), nullable=False
    )
    updated_at = Column(
        sqlalchemy.DateTime(timezone=True),
        server_default=sqlalchemy.func.now(),
        onupdate=sqlalchemy.func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"


# Feature models import Base from here; resource_hub.platform.db.models
# gathers them all for create_all and alembic.
