from __future__ import annotations

from typing import Optional


class CodegenTagsError(Exception):
	"""Base class for every failure of a generation pass."""

	action = "failed on"

	def __init__(self, path: str, reason: Optional[BaseException] = None):
		self.path = path
		self.reason = reason
		message = f"{self.action} {path}"
		if reason is not None:
			message = f"{message}: {reason}"
		super().__init__(message)


class TraversalError(CodegenTagsError):
	action = "error walking"


class ReadError(CodegenTagsError):
	action = "error reading"


class BoilerplateError(CodegenTagsError):
	action = "error reading boilerplate"


class StatError(CodegenTagsError):
	action = "error checking"


class WriteError(CodegenTagsError):
	action = "error writing"


class ConfigError(CodegenTagsError):
	action = "invalid config"
