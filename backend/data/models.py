from sqlalchemy import Column, Integer, String, Text, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from .database import Base


class VoterInfo(Base):
    __tablename__ = "voterinfo"
    __table_args__ = (UniqueConstraint("topic", "subtopic", name="uq_voterinfo_topic_subtopic"),)

    id = Column(Integer, primary_key=True, index=True)
    topic = Column(String, index=True, nullable=False)
    subtopic = Column(String, nullable=False)
    details = Column(Text, nullable=False)
    last_updated = Column(DateTime(timezone=True), server_default=func.now())


class QueryLog(Base):
    __tablename__ = "querylog"

    id = Column(Integer, primary_key=True, index=True)
    user_message = Column(Text, nullable=False)
    topic = Column(String, nullable=False)
    subtopic = Column(String, nullable=False)
    timestamp = Column(DateTime(timezone=True), server_default=func.now())


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)
    user_message = Column(Text, nullable=False)
    bot_response = Column(Text, nullable=False)
    rating = Column(Integer, nullable=True)  # 1-5, optional
    comment = Column(Text, nullable=True)
    timestamp = Column(DateTime(timezone=True), server_default=func.now())
