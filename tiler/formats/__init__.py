"""
Edge Tiler - File Formats

JSON tile set definitions and saved boards.
"""
