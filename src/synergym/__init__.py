"""synergym: fitness-tracking backend for exercises, routines and likes."""

__version__ = "0.1.0"
