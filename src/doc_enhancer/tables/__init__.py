"""Table detection, segmentation, and rendering.

Submodules:
  patterns     -- compiled regex patterns, thresholds, and border glyphs
  classifiers  -- single-line table-row classification rules
  schema       -- Table / report Pydantic models
  detection    -- segmentation of a text stream into tables and residual text
  formatting   -- grid and markdown rendering with plain-text fallback
  html         -- table extraction from HTML markup
"""
