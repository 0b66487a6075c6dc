"""
E2E test package for the to-do demo app.

This package contains Playwright-based browser tests and demonstrates:
- Page Object Model (POM) pattern
- Web-first assertions with built-in auto-waiting
- Inspecting client-side storage from the browser context
- User flow testing
"""
