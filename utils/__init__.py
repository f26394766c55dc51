"""
utils package
-------------

Contains utility modules used throughout the ward application.

Includes the constants loaded from config/constants.json, bed numbering helpers, the shared logger and the text report of ward state.
"""
