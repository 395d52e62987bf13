"""
Adapters - Outer surfaces over the simulator.

    cli  - voice-navigator command-line driver
"""

from voice_navigator.adapters.cli import main

__all__ = ["main"]
