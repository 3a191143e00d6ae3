"""Kitchen planning: cabinet placement and procedural worktops and plinths."""

__version__ = "0.1.0"
