# minimal_apis/tasks/models.py

from sqlalchemy import Boolean, Column, Integer, String

from .db import Base


class Task(Base):
    __tablename__ = "tarefas"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False, index=True)

    def __repr__(self):
        return f"<Task(id={self.id}, name='{self.name}', completed={self.is_completed})>"
