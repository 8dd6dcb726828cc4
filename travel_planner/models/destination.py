from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from travel_planner.database import Base


class SelectedDestination(Base):
    __tablename__ = "selected_destinations"
    __table_args__ = (
        UniqueConstraint("user_id", "country_code", name="uq_destination_user_country"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    country_code = Column(String(2), nullable=False)
    country_name = Column(String, nullable=False)
