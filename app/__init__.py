"""
BhashaConnect API
Multilingual listing service for jobs, training, marketplace and schemes.

Architecture:
- MongoDB: one collection per listing kind, plus users
- FastAPI: one generic router factory, configured per resource
"""

__version__ = "1.0.0"
