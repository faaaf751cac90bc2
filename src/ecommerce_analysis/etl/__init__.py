"""
ETL Module

Extract, normalize, aggregate and rank sales records.
"""
