"""
Core Utilities - configuration, logging and HTTP plumbing shared by all layers
"""
