"""
langprobe command-line interface.
"""
