"""Data loading utilities."""

from .exercise_loader import load_exercise_records, seed_exercises

__all__ = ["load_exercise_records", "seed_exercises"]
