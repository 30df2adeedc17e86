"""Core models, settings and exceptions for ccfilter."""
