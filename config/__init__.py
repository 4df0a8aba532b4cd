"""
Project configuration: paths (medallion layout) and dataset settings
"""
