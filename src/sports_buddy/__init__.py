"""
Sports Buddy API: accounts and sport meetup posts backed by MongoDB.
"""

__version__ = "1.0.0"
