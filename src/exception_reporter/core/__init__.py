"""Core domain package for exception_reporter.

Core contains detail extraction, ignore filtering, formatting and truncation
without any HTTP or framework-specific code, keeping the reporting logic
portable across host applications.
"""
