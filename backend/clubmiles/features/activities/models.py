"""
Activity model.

One row per exercise session, imported from Strava or entered manually.
"""

from sqlalchemy import Column, String, Float, Boolean, ForeignKey, Text

from clubmiles.db.base import Base


class Activity(Base):
    """
    Club activity.

    Imported rows are keyed by the Strava activity ID and re-upserted on
    every sync; manual rows get a random UUID and no Strava link.
    """

    __tablename__ = "activities"

    id = Column(String(64), primary_key=True)
    athlete_id = Column(
        String(64),
        ForeignKey("users.athlete_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Denormalized "first last" at the time of the sync
    athlete_name = Column(String(255), nullable=True)

    # Activity info
    activity_name = Column(Text, nullable=True)
    type = Column(String(50), nullable=False)  # Classified category
    distance_miles = Column(Float, nullable=False, default=0.0)
    start_date = Column(String(40), nullable=False, index=True)  # As received
    week_commencing = Column(String(10), nullable=False)  # DD/MM/YYYY

    strava_link = Column(String(255), nullable=True)
    manual_entry = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<Activity {self.id} {self.type} {self.distance_miles}mi>"
