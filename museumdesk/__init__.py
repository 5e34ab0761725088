"""Museum front-desk library: exhibits, guides, schedules, users, tickets and JSON storage."""

__version__ = "0.1.0"