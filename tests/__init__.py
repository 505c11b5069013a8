"""
Test Suite for the Cash Deposit Extractor

Test Structure:
- fixtures/: Synthetic alert bodies and lookup data
- unit/: Unit tests mirroring src/ package structure
- integration/: Processor and CLI workflow tests

All test data is synthetic and contains no real client information.
"""
