#!/usr/bin/env python3
"""
Shared SQLAlchemy base for the Finance Ledger API.

- Integer autoincrement primary key
- created_at timestamp filled by the database (func.now(); CURRENT_TIMESTAMP on SQLite)

Models never commit themselves: the stores in this package add/flush through
the session owned by DBStorage and the service layer decides when to commit.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Declarative base for all models
Base = declarative_base()


class BaseModel:
    """
    Base mixin for all persistent models: id and created_at.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"
