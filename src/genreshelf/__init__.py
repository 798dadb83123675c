"""
genreshelf - genre browsing and personal reading lists
"""
__version__ = '1.0.0'
