"""Loading of the JSON configuration file.

The file holds a single object whose keys are the fields of
:class:`~codegen_tags.model.GeneratorConfig`; unknown keys are rejected.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from .errors import ConfigError
from .model import GeneratorConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".codegen-tags.json"


def parse_config(text: str, path: str = "<config>") -> GeneratorConfig:
	try:
		data = json.loads(text)
	except json.JSONDecodeError as e:
		raise ConfigError(path, e) from e
	try:
		return GeneratorConfig.model_validate(data)
	except ValidationError as e:
		raise ConfigError(path, e) from e


def load_config(path: str) -> GeneratorConfig:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except OSError as e:
		raise ConfigError(path, e) from e
	logger.debug("loaded config from %s", path)
	return parse_config(text, path)
