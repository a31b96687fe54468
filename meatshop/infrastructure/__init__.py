"""
Infrastructure layer: configuration glue, logging, persistence and services
"""
