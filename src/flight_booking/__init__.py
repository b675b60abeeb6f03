"""
Flight Booking Service

Flight booking records with a time-windowed change and cancellation policy,
served over HTTP and through tools for a conversational agent.
"""

__version__ = "1.0.0"
__author__ = "Flight Booking Team"
