"""
Table names and secondary indexes of the marketplace schema.

The tables themselves are created by ``sql/schema.sql``; user identities live
in the platform-managed ``auth.users`` table. Every query the record store
issues must be scoped by one of the indexed columns listed here.
"""
from typing import Dict, FrozenSet

PROFILES = "profiles"
SERVICES = "services"
BOOKINGS = "bookings"
MESSAGES = "messages"

INDEXES: Dict[str, FrozenSet[str]] = {
    PROFILES: frozenset({"user_id"}),
    SERVICES: frozenset({"provider_id", "category", "location", "is_active"}),
    BOOKINGS: frozenset({"customer_id", "provider_id", "service_id", "status"}),
    MESSAGES: frozenset({"booking_id", "sender_id"}),
}


def check_index(table: str, column: str) -> None:
    if table not in INDEXES:
        raise ValueError(f"Unknown table: {table}")
    if column not in INDEXES[table]:
        raise ValueError(f"No index on {table}.{column}")
