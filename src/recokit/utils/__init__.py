"""Utility functions and tools used across the recokit package.

**Core Utilities:**
- `config`: Configuration file parsing (YAML with includes and overrides)
- `factory`: Generic factory pattern implementations
- `logger`: Logging utilities and configuration
- `globals`: Global constants shared by the reconstruction algorithms
- `enums`: Enumerated types (detector regions, tracker subsystems)
- `trkrdefs`: Encoding and decoding of hitset and cluster keys
"""
