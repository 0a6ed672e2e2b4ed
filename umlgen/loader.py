from __future__ import annotations

import logging
import os

from pydantic import ValidationError

from .errors import FilterConfigError, SnapshotError, SnapshotNotFoundError
from .filters import FilterConfig
from .model import SymbolModel

logger = logging.getLogger(__name__)


def parse_symbol_model(text: str, source: str = "<string>") -> SymbolModel:
	try:
		return SymbolModel.model_validate_json(text)
	except ValidationError as e:
		raise SnapshotError(f"Invalid symbol snapshot {source}: {e}") from e


def load_symbol_model(path: str) -> SymbolModel:
	"""Read a JSON snapshot produced by an external analyzer."""
	if not os.path.isfile(path):
		raise SnapshotNotFoundError(f"The specified file does not exist: {path}")
	with open(path, "r", encoding="utf-8") as fh:
		text = fh.read()
	model = parse_symbol_model(text, source=path)
	logger.info("Loaded %d types from %s", len(model.types), path)
	return model


def load_filter_config(path: str) -> FilterConfig:
	if not os.path.isfile(path):
		raise FilterConfigError(f"Filter configuration not found: {path}")
	with open(path, "r", encoding="utf-8") as fh:
		text = fh.read()
	try:
		config = FilterConfig.model_validate_json(text)
	except ValidationError as e:
		raise FilterConfigError(f"Invalid filter configuration {path}: {e}") from e
	logger.info("Loaded filter configuration from %s", path)
	return config
