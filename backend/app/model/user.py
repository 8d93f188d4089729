# app/model/user.py
from sqlalchemy import Column, Integer, String
from app.data.database import Base

class User(Base):
    __tablename__ = "users"
    # AUTOINCREMENT: ids nunca são reaproveitados, mesmo após um delete
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    age = Column(Integer, nullable=False)
