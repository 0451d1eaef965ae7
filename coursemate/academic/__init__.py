# academic/__init__.py
"""
Requirement resolution, course-code normalization and prerequisite graph
assembly. Import submodules directly (e.g. coursemate.academic.credit_check).
"""
