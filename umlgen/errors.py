from __future__ import annotations


class UmlGenError(Exception):
	"""Base class for errors raised around the renderer (loading, configuration)."""


class SnapshotError(UmlGenError):
	pass


class SnapshotNotFoundError(SnapshotError):
	pass


class FilterConfigError(UmlGenError):
	pass
