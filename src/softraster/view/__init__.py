"""
Presenters that consume the exported scene bytes.
"""
