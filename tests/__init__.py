"""
Menu Adventures Test Suite

Test structure:
- unit/: Test components in isolation
- integration/: Play whole games through the scripted interface and the CLI
- fixtures/: Shared test worlds built in Python
- mocks/: Mock implementations for testing
"""
