"""
Workbook reading and file handling.
"""
