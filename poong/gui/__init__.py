"""
PyGame front end for Poong
"""
