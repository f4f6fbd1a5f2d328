"""
Movie Registry - runtime support for the movie CRUD API

Settings, logging, domain errors and the records loaded at startup.
"""

__version__ = "0.1.0"
