"""Run, check and track progress through a course of small programming exercises."""

__version__ = "5.3.0"