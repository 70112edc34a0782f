"""Tactical board document engine.

Components:
- models: element variants, capability predicates, steps and documents
- board: element factories and edits
- orientation: landscape/portrait transform engine
- timeline: step list operations
- interpolation: playback frames between steps
- serialization: versioned JSON encoding and migration
"""

__version__ = "0.1.0"
