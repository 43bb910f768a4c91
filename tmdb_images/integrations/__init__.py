"""
External integrations (third-party APIs).
"""
