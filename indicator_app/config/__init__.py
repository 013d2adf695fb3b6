"""
Configuration module.

Default indicator parameters, YAML override loading and parameter validation.
"""
