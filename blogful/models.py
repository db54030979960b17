from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Article(Base):
    __tablename__ = "blogful_articles"
    # keep ids monotonic on SQLite so deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    style = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    date_published = Column(DateTime, nullable=False, default=datetime.utcnow)
