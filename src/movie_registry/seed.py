"""
Sample movies loaded into the registry at startup.

The registry is in-memory only, so these two records are restored on every
process start.
"""

from typing import Any, Dict, List

SEED_MOVIES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "isbn": "001",
        "title": "Movie One",
        "director": {"firstname": "John", "lastname": "Doe"},
    },
    {
        "id": "2",
        "isbn": "002",
        "title": "Movie Two",
        "director": {"firstname": "Jane", "lastname": "Doe"},
    },
]
