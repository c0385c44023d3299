"""
PySide6 front end: catalog table, paginator and bulk-selection popup.
"""
