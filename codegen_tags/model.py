from __future__ import annotations

import re
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, field_validator


class GeneratorConfig(BaseModel):
	model_config = ConfigDict(extra="forbid")

	go_prefix: str = ""
	# Regular expressions searched against root-relative directory paths.
	skipped_paths: List[str] = []
	skipped_codegen_paths: List[str] = []
	codegen_bzl_file: str = ""
	codegen_boilerplate_file: str = ""
	codegen_tags: List[str] = []
	source_suffix: str = ".go"
	test_suffix: str = "_test.go"

	@field_validator("skipped_paths", "skipped_codegen_paths")
	@classmethod
	def _check_patterns(cls, patterns: List[str]) -> List[str]:
		for pattern in patterns:
			try:
				re.compile(pattern)
			except re.error as e:
				raise ValueError(f"invalid regular expression {pattern!r}: {e}") from e
		return patterns

	def skip_patterns(self) -> List[re.Pattern[str]]:
		return [re.compile(p) for p in [*self.skipped_paths, *self.skipped_codegen_paths]]


class GenerateResult(BaseModel):
	path: str
	changed: bool
	dry_run: bool = False
	tags_values_pkgs: Dict[str, Dict[str, List[str]]] = {}
