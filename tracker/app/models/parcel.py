"""
Parcel database model.

One row per shipment tracked for a client.
"""

from sqlalchemy import Column, Integer, String
from tracker.app.db.session import Base


class Parcel(Base):
    """
    Parcel model for the tracker.
    
    Status is stored as plain text: the store accepts any value,
    ParcelStatus only names the ones the workflow knows about.
    """
    __tablename__ = "parcel"
    __table_args__ = {"sqlite_autoincrement": True}
    
    number = Column(Integer, primary_key=True, autoincrement=True)
    
    # Ownership
    client = Column(Integer)
    
    status = Column(String)
    address = Column(String)
    
    # RFC3339 string, set once on insert
    created_at = Column(String)
    
    def __repr__(self):
        return f"<Parcel(number={self.number}, client={self.client}, status='{self.status}')>"
