"""
havenpaper - set the desktop background to a picture from a Wallhaven collection.
"""
