"""
LMS: an in-memory learning management registry.

Administrators, teachers and students work on a shared registry of courses,
content items, enrollments and grades through role-scoped operations.
"""

__version__ = "1.0.0"
__author__ = "LMS Development Team"
__description__ = "In-memory learning management registry"
