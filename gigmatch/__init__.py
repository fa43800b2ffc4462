"""Matching, ranking and safety core for a hyperlocal gig-job marketplace."""

__version__ = "0.3.0"
