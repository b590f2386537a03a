"""Core domain package for licident.

Core contains normalization, digest and dedup logic without any file, config
or terminal specific code, keeping the identity rules portable.
"""
