"""
tests.unit
==========

Unit tests for the sequencer-types value types, codecs and records.
"""
