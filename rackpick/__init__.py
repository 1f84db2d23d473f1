"""
Rack Pick List
Rack-grouped picking report for warehouse orders
"""

__version__ = "1.0.0"
