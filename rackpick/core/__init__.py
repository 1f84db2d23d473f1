"""
Rack Pick List Core
Configuration, database, logging and exceptions
"""
