"""Class diagram generation from an analyzer's symbol snapshot.

Modules:
- model.py: Immutable symbol model (types, members, relationships).
- filters.py: Filter policy deciding which relationship edges are noise.
- render.py: Deterministic classDiagram text rendering.
- loader.py: Loading snapshots and filter configuration from JSON files.
- errors.py: Exceptions raised while loading input.
"""

__all__ = [
	"model",
	"filters",
	"render",
	"loader",
	"errors",
]
