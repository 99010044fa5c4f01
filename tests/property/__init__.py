"""
Property-based testing suite for the Rugplay CLI.

Uses Hypothesis to generate inputs for the formatting, argument binding
and configuration round-trip properties.
"""
