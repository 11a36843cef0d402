"""
Core types for dispnet_hash: exceptions, models, settings and the
service container.
"""
