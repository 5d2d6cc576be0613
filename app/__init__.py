"""
Career Guidance API
REST backend for university admissions guidance.

Architecture:
- Relational database (PostgreSQL by default): users, institutions, faculties,
  courses, applications, admissions
- Raw parameterized SQL through SQLAlchemy, one session per request
- Local disk: uploaded profile pictures and institution logos
"""

__version__ = "1.0.0"
