"""Core domain package for richfields.

Core contains scrubbing, month/year merging, and dirty tracking without any UI
or framework-specific code, keeping the field logic portable.
"""
