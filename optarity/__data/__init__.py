"""
Packaged data files for optarity
"""
