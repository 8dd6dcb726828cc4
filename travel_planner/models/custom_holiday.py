from sqlalchemy import Column, Integer, String, Date, ForeignKey
from travel_planner.database import Base


class CustomHoliday(Base):
    """Company-specific day off. Created and deleted, never edited."""
    __tablename__ = "custom_holidays"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    date = Column(Date, nullable=False)
    name = Column(String, nullable=False)
