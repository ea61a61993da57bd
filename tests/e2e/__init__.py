"""End-to-end tests for go2rpm against real repositories.

These tests are:
- Skipped by default (require GO2RPM_E2E environment variable)
- Dependent on git, go and network access
- Slower than unit tests
"""
