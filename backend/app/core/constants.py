"""Shared constants for the hike log.

Keeps the storage key names and canned messages in one place so the
store, repository and API agree on them.
"""

# Single table holding one row per hike
HIKES_TABLE = "hikes"

# Physical column name of the coordinate pair (kept camelCase on disk)
LOCATION_COORDS_COLUMN = "locationCoords"

# Message returned for update/delete/read on an id that is not stored
HIKE_NOT_FOUND = "Hike not found"

# Stored integer flags for is_completed
COMPLETED = 1
NOT_COMPLETED = 0
