"""
CourseMate - remaining degree requirements and prerequisite graphs.

Given a degree program and the courses a student has completed, CourseMate
works out which major requirements are still outstanding and assembles the
prerequisite structure of those courses as nodes and edges for a
directed-graph layout.
"""

__version__ = "1.0.0"
