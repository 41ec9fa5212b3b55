# db/base_class.py
from sqlalchemy import Column, String
from sqlalchemy.orm import as_declarative, declared_attr


@as_declarative()
class Base:
    __name__: str

    # Every table is keyed by a server-minted uuid4 string (see CRUDRepository.create)
    id = Column(String(36), primary_key=True)

    # Models set __tablename__ explicitly; this is the fallback
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"
