"""
API Repositories - Data access abstraction layer

Provides the interface handlers use to read and mutate the movie collection.
The in-memory implementation is the only backend; the abstract base keeps
the routers independent of it.

Pattern: Repository Pattern
"""
