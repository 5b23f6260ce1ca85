"""
SwiftTranslator Singlish-to-Sinhala test suites.

Kept importable so that `run_tests.py`, the conftest files and IDEs can
reach the framework, page objects and scenario table as
`sinhala_suites.ui_testing.*`.
"""
