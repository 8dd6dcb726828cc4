from sqlalchemy import Column, Integer, String, Float
from travel_planner.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    total_leave_days = Column(Float, nullable=False, default=15.0)
    # Stored independently of the plans; the ledger derives "planned" days itself
    used_leave_days = Column(Float, nullable=False, default=0.0)

    def __repr__(self):
        return f"<User {self.username} ({self.total_leave_days}/{self.used_leave_days})>"
