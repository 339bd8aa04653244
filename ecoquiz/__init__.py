"""
EcoQuiz: quiz delivery, grading and points for the environmental-education app.
"""

__version__ = "0.1.0"
