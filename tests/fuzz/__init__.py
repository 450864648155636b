"""Fuzz testing for combilex.

This package contains intensive property tests that compose random parser
trees and compare repetition against a reference model. They are skipped
in normal runs; run them with ``pytest -m fuzz``.

Python 3.13+.
"""
