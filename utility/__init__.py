"""
Shared utilities: runtime configuration and JSON schema checking.
"""
