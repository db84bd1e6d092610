"""
Configuration, logging, database and error types shared by the app.
"""
