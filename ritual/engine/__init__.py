"""
The Ritual of Five Hands - game engine
Round resolution and ritual progression, without web framework or UI
"""

MOVE_COUNT = 5

# Each move defeats exactly this many of the others.
BEATEN_PER_MOVE = 2
