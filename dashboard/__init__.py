"""
Video-analytics dashboard core.

Sub-profile configuration model, its codec and validation, and the
client-side lifecycle for sub-profiles of a profile.
"""
