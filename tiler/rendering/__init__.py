"""
Edge Tiler - Rendering

Static previews of boards and catalogs.
"""
