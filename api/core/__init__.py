"""
Settings, the MySQL pool and logging setup used by every feature package.
"""
