"""
User Directory - fetch, normalize and query users from a demo REST API
"""

__version__ = "1.0.0"
