"""
Patience - Klondike Rule Engine

A deterministic, side-effect-free rule engine for single-player patience.
The engine provides:
- The card model and the fixed Klondike deal
- An immutable table state
- Legality rules for tableau and foundation placement
- A reducer that turns (state, action) into the next state
- Read-only queries for building drag-and-drop affordances
"""

__version__ = "0.1.0"
