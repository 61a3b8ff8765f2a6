"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.
    
    Status flow:
        REGISTERED → SENT → DELIVERED
    Only REGISTERED parcels may change address or be deleted.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


# Allowed forward transitions; DELIVERED is terminal
NEXT_STATUS = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
}
