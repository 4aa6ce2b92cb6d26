"""
tests.property
==============

Hypothesis property suites: codec round trips and commitment sensitivity.
"""
