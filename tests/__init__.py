"""Test suite for formtypes.

This package contains tests for:
- Type registry lookups and extension attachment order
- Builder creation, option merging and option validation
- Guess arbitration and property-based builder creation
- Core types, the annotation guesser and builder children
"""
