"""
Test Fixtures

Synthetic deposit alert bodies and lookup table contents shared by the unit
and integration tests. None of it is real client data.
"""
